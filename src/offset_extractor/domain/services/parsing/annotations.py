#!/usr/bin/env python3

"""Collect ``btf_decl_tag`` annotations attached to a DIE.

clang records ``__attribute__((btf_decl_tag("x")))`` as
``DW_TAG_LLVM_annotation`` children of the annotated DIE; GCC chains
``DW_TAG_GNU_annotation`` DIEs through ``DW_AT_GNU_annotation``. Both carry
``DW_AT_name = "btf_decl_tag"`` and the tag text in ``DW_AT_const_value``.
"""

from elftools.dwarf.die import DIE

from ...models.dwarf.tag_constants import (
    BTF_DECL_TAG,
    GNU_ANNOTATION_ATTRIBUTES,
    GNU_ANNOTATION_TAGS,
    LLVM_ANNOTATION_TAGS,
)
from .die_type_classifier import DIETypeClassifier, decode_string

# A malformed GNU chain pointing back at itself must not loop forever
MAX_ANNOTATION_CHAIN = 64


def _tag_value(annotation: DIE) -> str | None:
    if DIETypeClassifier.get_name(annotation) != BTF_DECL_TAG:
        return None
    value = annotation.attributes.get("DW_AT_const_value")
    if value is None:
        return None
    return decode_string(value.value)


def _gnu_annotation_ref(die: DIE) -> DIE | None:
    for key in GNU_ANNOTATION_ATTRIBUTES:
        if key in die.attributes:
            return die.get_DIE_from_attribute(key)
    return None


def collect_decl_tags(die: DIE) -> tuple[str, ...]:
    """Return every ``btf_decl_tag`` string attached to ``die``, in DWARF order."""
    tags: list[str] = []

    if die.has_children:
        for child in die.iter_children():
            if child.tag in LLVM_ANNOTATION_TAGS:
                value = _tag_value(child)
                if value is not None:
                    tags.append(value)

    annotation = _gnu_annotation_ref(die)
    for _ in range(MAX_ANNOTATION_CHAIN):
        if annotation is None or annotation.tag not in GNU_ANNOTATION_TAGS:
            break
        value = _tag_value(annotation)
        if value is not None:
            tags.append(value)
        annotation = _gnu_annotation_ref(annotation)

    return tuple(tags)
