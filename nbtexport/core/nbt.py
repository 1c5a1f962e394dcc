from __future__ import annotations

from typing import TYPE_CHECKING

from amulet_nbt import CompoundTag, IntTag, ListTag, StringTag

if TYPE_CHECKING:
    from amulet_nbt import NamedTag

COMPOUND_TAG_ID = 10


def empty_compound_list() -> ListTag:
    return ListTag([], COMPOUND_TAG_ID)


def int_list(*values: int) -> ListTag:
    return ListTag([IntTag(value) for value in values])


def name_entry(name: str) -> CompoundTag:
    return CompoundTag({"Name": StringTag(name)})


def serialize(tree: NamedTag) -> bytes:
    # Java edition NBT; the container writer applies its own compression
    return tree.to_nbt(compressed=False, little_endian=False)
