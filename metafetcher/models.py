from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Metadata:
    """
    Link-preview metadata for a single page.
    Each field is None when no matching tag was found in the document.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None          # og:image only, no html fallback

    def to_dict(self) -> dict:
        return {k: v for k, v in self.__dict__.items()}
