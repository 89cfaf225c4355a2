"""Annotation names recognized as endpoint mappings and their HTTP verbs."""

ANNOTATION_PACKAGE = "org.springframework.web.bind.annotation"

REQUEST_MAPPING = f"{ANNOTATION_PACKAGE}.RequestMapping"
DELETE_MAPPING = f"{ANNOTATION_PACKAGE}.DeleteMapping"
GET_MAPPING = f"{ANNOTATION_PACKAGE}.GetMapping"
PATCH_MAPPING = f"{ANNOTATION_PACKAGE}.PatchMapping"
POST_MAPPING = f"{ANNOTATION_PACKAGE}.PostMapping"
PUT_MAPPING = f"{ANNOTATION_PACKAGE}.PutMapping"

# Annotations whose name alone fixes the verb.
FIXED_VERB_MAPPINGS: dict[str, str] = {
    DELETE_MAPPING: "DELETE",
    GET_MAPPING: "GET",
    PATCH_MAPPING: "PATCH",
    POST_MAPPING: "POST",
    PUT_MAPPING: "PUT",
}

MAPPINGS = frozenset({REQUEST_MAPPING, *FIXED_VERB_MAPPINGS})

# `method = RequestMethod.X` as rendered in annotation-value text.
REQUEST_METHOD_VERBS: dict[str, str] = {
    f"{ANNOTATION_PACKAGE}.RequestMethod.{verb}": verb
    for verb in ("DELETE", "GET", "PATCH", "POST", "PUT")
}

PATH = "path"
VALUE = "value"
METHOD = "method"
RETURN_TAG = "@return"


def is_mapping(type_name: str) -> bool:
    """Check if the annotation type is one of the recognized mappings."""
    return type_name in MAPPINGS
