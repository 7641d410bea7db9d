"""FastAPI + Tailwind interface for the link checker.

Run with:
    uvicorn link_checker.web:app --reload
"""
from __future__ import annotations

from html import escape
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from .app import LinkCheckerApp
from .checker import StatusChecker
from .config import Settings
from .models import PolicyConfig, PolicyConfigError
from .report import render_report, to_json

app = FastAPI(title="Link Checker", description="Check Markdown links from the browser")

TAILWIND_CSS = "https://cdn.jsdelivr.net/npm/tailwindcss@3.4.4/dist/tailwind.min.css"


class CheckRequest(BaseModel):
    text: str
    pass_codes: List[int] = Field(default_factory=list, alias="pass")
    fail_codes: List[int] = Field(default_factory=list, alias="fail")
    only: Optional[int] = None


def _build_checker(policy: PolicyConfig) -> LinkCheckerApp:
    return LinkCheckerApp(status_checker=StatusChecker(settings=Settings.from_env()), policy=policy)


def _parse_codes(raw: str) -> List[int]:
    return [int(part) for part in raw.replace(",", " ").split() if part]


def _layout(content: str) -> str:
    return (
        "<!doctype html><html lang=\"en\"><head><meta charset=\"utf-8\" />"
        "<title>Link Checker</title>"
        f"<link href=\"{TAILWIND_CSS}\" rel=\"stylesheet\" /></head>"
        "<body class=\"max-w-3xl mx-auto p-6\"><h1 class=\"text-2xl font-semibold\">Link Checker</h1>"
        f"{content}</body></html>"
    )


def _form_page(report: str | None = None) -> str:
    """Render the landing page with optional report output."""

    text_form = """
    <form action=\"/check-text\" method=\"post\" class=\"bg-gray-50 border border-gray-200 rounded-lg p-4 mt-6\">
        <label class=\"block text-sm font-medium text-gray-700 mb-2\" for=\"text\">Markdown text</label>
        <textarea name=\"text\" required placeholder=\"See [docs](https://example.com)...\" class=\"w-full h-44 border border-gray-300 rounded-md p-3 text-sm\"></textarea>
        <div class=\"grid grid-cols-3 gap-3 mt-3\">
            <input type=\"text\" name=\"pass_codes\" placeholder=\"Pass codes, e.g. 403 429\" class=\"border border-gray-300 rounded-md p-2 text-sm\" />
            <input type=\"text\" name=\"fail_codes\" placeholder=\"Fail codes, e.g. 204\" class=\"border border-gray-300 rounded-md p-2 text-sm\" />
            <input type=\"text\" name=\"only\" placeholder=\"Only code, e.g. 200\" class=\"border border-gray-300 rounded-md p-2 text-sm\" />
        </div>
        <button type=\"submit\" class=\"mt-4 inline-flex items-center px-4 py-2 bg-indigo-600 text-white rounded-md shadow hover:bg-indigo-700\">Check Links</button>
    </form>
    """

    report_block = ""
    if report is not None:
        report_block = f"""
        <div class=\"mt-8\">
            <h2 class=\"text-xl font-semibold text-gray-800\">Link Report</h2>
            <pre class=\"mt-3 bg-gray-900 text-green-100 p-4 rounded-lg whitespace-pre-wrap text-sm\">{escape(report)}</pre>
        </div>
        """

    return _layout(text_form + report_block)


@app.get("/", response_class=HTMLResponse)
async def home() -> HTMLResponse:
    """Serve the text submission form."""

    return HTMLResponse(_form_page())


@app.post("/check-text", response_class=HTMLResponse)
async def check_text(
    text: str = Form(...),
    pass_codes: str = Form(""),
    fail_codes: str = Form(""),
    only: str = Form(""),
) -> HTMLResponse:
    """Check links in pasted text and return a formatted report."""

    try:
        policy = PolicyConfig.build(
            _parse_codes(pass_codes),
            _parse_codes(fail_codes),
            int(only) if only.strip() else None,
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    _, result = await _build_checker(policy).check_text(text)
    return HTMLResponse(_form_page(render_report(result)))


@app.post("/api/check")
async def check_api(request: CheckRequest) -> Dict[str, Any]:
    """Check links in JSON-submitted text and return structured results."""

    try:
        policy = PolicyConfig.build(request.pass_codes, request.fail_codes, request.only)
    except PolicyConfigError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    _, result = await _build_checker(policy).check_text(request.text)
    return to_json(result)


def main() -> None:
    """Run the FastAPI app using uvicorn."""

    import uvicorn

    uvicorn.run("link_checker.web:app", host="0.0.0.0", port=8000, reload=False)


__all__ = ["app", "main"]
