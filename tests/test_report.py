from link_checker.models import ClassificationResult, ProbeOutcome
from link_checker.report import render_plain, render_report, render_table, to_json


def _result():
    return ClassificationResult(
        good=[ProbeOutcome(target="https://example.com/ok", status_code=200)],
        bad=[
            ProbeOutcome(target="https://example.com/404", status_code=404),
            ProbeOutcome(target="https://example.com/a-much-longer-path/that/overflows", status_code=500),
        ],
        failed=[ProbeOutcome(target="https://down.test/", error="connection refused")],
    )


def test_table_columns_fit_longest_link():
    table = render_table(_result().bad).splitlines()

    assert table[0].startswith("Link")
    assert "Status" in table[0]
    longest = "https://example.com/a-much-longer-path/that/overflows"
    assert table[3].startswith(longest + " 500")
    assert table[2][len(longest) + 1 :].startswith("404")


def test_table_respects_minimum_widths():
    header = render_table([ProbeOutcome(target="x", status_code=404)]).splitlines()[0]

    assert header.index("Status") == 21


def test_plain_report_lists_broken_targets_only():
    assert render_report(_result(), plain=True) == (
        "https://example.com/404\nhttps://example.com/a-much-longer-path/that/overflows"
    )
    assert render_plain([]) == ""


def test_full_report_mentions_summary_and_unreachable_links():
    report = render_report(_result())

    assert report.startswith("1 out of 3 links are working!")
    assert "2 links are broken!" in report
    assert "Broken Links:" in report
    assert "https://down.test/ -> connection refused" in report


def test_full_report_without_broken_links_is_just_summary():
    result = ClassificationResult(good=[ProbeOutcome(target="https://a.test", status_code=200)])

    assert render_report(result) == "1 out of 1 links are working!"


def test_json_payload():
    payload = to_json(_result())

    assert payload["summary"] == "1 out of 3 links are working!"
    assert payload["good"] == [{"link": "https://example.com/ok", "status": 200}]
    assert payload["failed"] == [{"link": "https://down.test/", "error": "connection refused"}]
