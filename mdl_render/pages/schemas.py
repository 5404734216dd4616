"""Template context for a single page."""

from pydantic import BaseModel, Field

from mdl_render.views.schemas import RenderedView

from .templates import DEFAULT_CSS


class ViewData(BaseModel):
    """Data bound to the page template for one view."""

    title: str = ""
    description: str = ""
    version: str = Field(default="", description="Version of the design")
    mermaid_source: str = Field(default="", description="Mermaid diagram source, inserted verbatim")
    mermaid_config: str = Field(
        default="",
        description="Mermaid config JSON text, spread into mermaidAPI.initialize when non-empty",
    )
    css: str = Field(default=DEFAULT_CSS, description="Stylesheet inlined in the page head")

    @classmethod
    def from_view(cls, view: RenderedView, mermaid_config: str = "", css: str = DEFAULT_CSS) -> "ViewData":
        return cls(
            title=view.title,
            description=view.description,
            version=view.version,
            mermaid_source=view.mermaid,
            mermaid_config=mermaid_config,
            css=css,
        )
