"""Domain models (Pydantic v2).

These describe *what* a result is, not *how* it is obtained.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TitleResult(BaseModel):
    """A successfully extracted page title.

    `url` is the exact URL that was requested (after the default scheme was
    applied), which is also what the Markdown link points to. `final_url` is
    where redirects ended up and is informational only.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        min_length=1,
        description="Entity-decoded, whitespace-normalized title text.",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="URL used for the request.",
    )
    final_url: str | None = Field(
        default=None,
        description="URL of the last response after following redirects.",
    )
    truncated: bool = Field(
        default=False,
        description="True when the body hit the size cap and was not read to the end.",
    )
