# Formatted with the offending element's type name
UNHASHABLE_ELEMENT_STRING: str = "unhashable type: '{type_name}' cannot be stored in a HashSet"
