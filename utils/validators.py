from typing import Optional


class TextValidator:
    """Field checks for the add-book and add-member inputs."""

    @staticmethod
    def _is_non_blank(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator._is_non_blank(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return TextValidator._is_non_blank(author)

    @staticmethod
    def validate_name(name: Optional[str]) -> bool:
        return TextValidator._is_non_blank(name)

    @staticmethod
    def normalize_isbn(raw: Optional[str]) -> Optional[str]:
        """Trim surrounding whitespace, keeping the ISBN as typed; blank input becomes None so the book falls back to 'Unknown'."""
        if raw is None:
            return None
        return raw.strip() or None
