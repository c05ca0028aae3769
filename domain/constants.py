"""Naming conventions shared by the accessor and the loaders."""

# Optional marker in front of a dispatch name: "getMagicPlace" -> "MagicPlace"
GET_PREFIX = "get"

# Item identifier = filename minus this many trailing characters (".yml")
ITEM_SUFFIX_LEN = 4
