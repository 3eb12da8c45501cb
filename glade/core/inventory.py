from pydantic import BaseModel, Field, field_validator


def normalize_tag(tag: str) -> str:
    """Item tags are case-insensitive; they are kept lower-cased."""
    return tag.lower()


class Inventory(BaseModel):
    """
    An ordered bag of item tags.

    Composed by value into anything that can hold items (locations, players).
    Each owner gets its own instance through ``default_factory`` so two owners
    never share the underlying list. Tags are lower-cased on the way in and
    when looked up, matching how player input is tokenized.
    """

    items: list[str] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def normalize_items(cls, items: list[str]) -> list[str]:
        return [normalize_tag(tag) for tag in items]

    def has_item(self, tag: str) -> bool:
        """Check whether at least one ``tag`` is held."""
        return normalize_tag(tag) in self.items

    def add_item(self, tag: str) -> None:
        """Append ``tag`` to the end of the inventory."""
        self.items.append(normalize_tag(tag))

    def remove_item(self, tag: str) -> bool:
        """Remove the first occurrence of ``tag``.

        Args:
            tag: The item tag to remove

        Returns:
            True if an item was removed, False if none was held
        """
        tag = normalize_tag(tag)
        for index, item in enumerate(self.items):
            if item == tag:
                del self.items[index]
                return True
        return False
