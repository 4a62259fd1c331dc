import uuid
from typing import Iterable, List


def generate_field_id(taken: Iterable[str] = ()) -> str:
    """Return a random id that is not in ``taken``."""
    taken = set(taken)
    while True:
        field_id = uuid.uuid4().hex
        if field_id not in taken:
            return field_id


def split_csv(value: str) -> List[str]:
    """Split on commas and strip each token. Empty tokens are kept."""
    return [token.strip() for token in value.split(",")]
