from typing import Optional

from taskmanager.core.exceptions import ValidationError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def clean_title(title: Optional[str], entity: str) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("title", f"{entity} title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError("title", f"{entity} title must be at most {TITLE_MAX_LENGTH} characters")
    return title


def clean_description(description: Optional[str], entity: str) -> Optional[str]:
    # chaîne vide après trim => stockée comme NULL
    if description is None:
        return None
    description = description.strip()
    if not description:
        return None
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            "description",
            f"{entity} description must be at most {DESCRIPTION_MAX_LENGTH} characters",
        )
    return description
