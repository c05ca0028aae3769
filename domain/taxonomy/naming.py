"""Pure name resolution: dispatch name -> taxonomy key, filename -> item identifier."""

from domain.constants import GET_PREFIX, ITEM_SUFFIX_LEN
from domain.errors import InvalidTaxonomyNameError
from domain.taxonomy.inflector import Inflector


def strip_get_prefix(dispatch_name: str) -> str:
    """Drop a leading "get" marker if present ("getMagicPlace" -> "MagicPlace")."""
    if dispatch_name.startswith(GET_PREFIX):
        return dispatch_name[len(GET_PREFIX) :]
    return dispatch_name


def resolve_taxonomy_key(dispatch_name: str, inflector: Inflector | None) -> str:
    """
    Resolve a dispatch name into the canonical taxonomy key.

    Args:
        dispatch_name: e.g. "getMagicPlace", "MagicPlace" or "magic_place"
        inflector: Transform applied to the raw name; None keeps it verbatim

    Returns:
        Directory name of the taxonomy under the storage root

    Raises:
        InvalidTaxonomyNameError: If the key is empty or would escape the storage root
    """
    raw = strip_get_prefix(dispatch_name)
    key = inflector(raw) if inflector is not None else raw

    if not key:
        raise InvalidTaxonomyNameError(dispatch_name, "resolves to an empty taxonomy key")
    if "/" in key or "\\" in key or key in (".", ".."):
        raise InvalidTaxonomyNameError(dispatch_name, f"key {key!r} is not a single directory name")
    return key


def item_identifier(filename: str) -> str | None:
    """Return the item identifier for a filename, or None if nothing remains after the suffix."""
    if len(filename) <= ITEM_SUFFIX_LEN:
        return None
    return filename[:-ITEM_SUFFIX_LEN]
