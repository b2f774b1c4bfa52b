"""``clickup-cli docs``: docs and pages (v3)."""

from typing import Optional

import typer

from clickup_cli.cli.common import output, run
from clickup_cli.models import CreateDocRequest, CreatePageRequest, EditPageRequest, ParentType

app = typer.Typer(no_args_is_help=True, help="Docs operations (needs a workspace ID).")

DOC_COLUMNS = [
    ("ID", lambda d: d.id),
    ("NAME", lambda d: d.name),
    ("DATE_CREATED", lambda d: d.date_created),
]

PAGE_COLUMNS = [
    ("ID", lambda p: p.id),
    ("NAME", lambda p: p.name),
]


def _page_md(page) -> str:
    lines = [f"## {page.name or 'Untitled'}", f"- **ID**: `{page.id}`"]
    if page.content:
        lines.append("")
        lines.append(page.content)
    return "\n".join(lines)


@app.command()
def search(ctx: typer.Context, query: str = typer.Argument("", help="Text to search for.")):
    """Search docs in the workspace."""
    result = run(ctx, lambda c: c.docs.search(query))
    output(ctx, result, result.docs, DOC_COLUMNS, title="Docs")


@app.command()
def get(ctx: typer.Context, doc_id: str = typer.Argument(..., help="Doc ID.")):
    """Get a doc."""
    doc = run(ctx, lambda c: c.docs.get(doc_id))
    output(ctx, doc, [doc], DOC_COLUMNS)


@app.command("page-listing")
def page_listing(ctx: typer.Context, doc_id: str = typer.Argument(..., help="Doc ID.")):
    """List a doc's pages without content."""
    result = run(ctx, lambda c: c.docs.page_listing(doc_id))
    output(ctx, result, result.pages, PAGE_COLUMNS, title="Pages")


@app.command()
def pages(ctx: typer.Context, doc_id: str = typer.Argument(..., help="Doc ID.")):
    """Get all pages of a doc with content."""
    result = run(ctx, lambda c: c.docs.pages(doc_id))
    human = "\n\n".join(_page_md(p) for p in result.pages) or "No pages found."
    output(ctx, result, result.pages, PAGE_COLUMNS, human=human)


@app.command()
def page(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., help="Doc ID."),
    page_id: str = typer.Argument(..., help="Page ID."),
):
    """Get one page with content."""
    p = run(ctx, lambda c: c.docs.page(doc_id, page_id))
    output(ctx, p, [p], PAGE_COLUMNS, human=_page_md(p))


@app.command()
def create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Doc name."),
    parent_type: Optional[ParentType] = typer.Option(None, help="Parent kind."),
    parent_id: Optional[str] = typer.Option(None, help="Parent ID."),
):
    """Create a doc."""
    req = CreateDocRequest(
        name=name,
        parent_type=parent_type.value if parent_type else None,
        parent_id=parent_id,
    )
    doc = run(ctx, lambda c: c.docs.create(req))
    output(ctx, doc, [doc], DOC_COLUMNS)


@app.command("create-page")
def create_page(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., help="Doc ID."),
    name: str = typer.Argument(..., help="Page name."),
    content: Optional[str] = typer.Option(None, help="Page content."),
    content_format: Optional[str] = typer.Option(None, help="'md' or 'html'."),
):
    """Add a page to a doc."""
    req = CreatePageRequest(name=name, content=content, content_format=content_format)
    p = run(ctx, lambda c: c.docs.create_page(doc_id, req))
    output(ctx, p, [p], PAGE_COLUMNS)


@app.command("edit-page")
def edit_page(
    ctx: typer.Context,
    doc_id: str = typer.Argument(..., help="Doc ID."),
    page_id: str = typer.Argument(..., help="Page ID."),
    name: Optional[str] = typer.Option(None, help="New name."),
    content: Optional[str] = typer.Option(None, help="New content."),
    content_format: Optional[str] = typer.Option(None, help="'md' or 'html'."),
):
    """Edit a page."""
    req = EditPageRequest(name=name, content=content, content_format=content_format)
    p = run(ctx, lambda c: c.docs.edit_page(doc_id, page_id, req))
    output(ctx, p, [p], PAGE_COLUMNS)
