from typing import Optional

from libcatalog.user import Role


ROLE_CHOICES = {"1": Role.STUDENT, "2": Role.FACULTY}


class TextValidator:
    """Basic checks for text typed at the menu prompts."""

    @staticmethod
    def validate_required(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        # must not be digits only
        if not TextValidator.validate_required(author):
            return False
        return not author.strip().isdigit()


class InputParser:
    """Parses numeric menu answers. Each returns None for unusable input."""

    @staticmethod
    def parse_user_id(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        if not s.isdecimal():
            return None
        return int(s)

    @staticmethod
    def parse_menu_choice(raw: Optional[str]) -> Optional[int]:
        if raw is None:
            return None
        s = raw.strip()
        if s.startswith("-"):
            sign, digits = -1, s[1:]
        else:
            sign, digits = 1, s
        if not digits.isdecimal():
            return None
        return sign * int(digits)

    @staticmethod
    def parse_role_choice(raw: Optional[str]) -> Optional[Role]:
        if raw is None:
            return None
        s = raw.strip()
        if s in ROLE_CHOICES:
            return ROLE_CHOICES[s]
        try:
            return Role.parse(s)
        except ValueError:
            return None
