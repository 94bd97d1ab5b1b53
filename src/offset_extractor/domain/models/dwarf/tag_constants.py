#!/usr/bin/env python3

"""DWARF tag and attribute constants used by the aggregate parser.

Vendor tags and attributes may be unknown to the installed pyelftools
release, in which case they surface as raw integers instead of names, so
both spellings are listed.
"""

# Aggregate definitions whose members can be exported
AGGREGATE_TAGS = frozenset(
    {
        "DW_TAG_structure_type",
        "DW_TAG_union_type",
        "DW_TAG_class_type",
    }
)

# Qualifiers that do not change layout; followed through DW_AT_type
# to reach the underlying type of a member
LAYOUT_TRANSPARENT_TAGS = frozenset(
    {
        "DW_TAG_const_type",
        "DW_TAG_volatile_type",
        "DW_TAG_restrict_type",
        "DW_TAG_atomic_type",
    }
)

# clang: __attribute__((btf_decl_tag(...))) as children of the annotated DIE
DW_TAG_LLVM_ANNOTATION = 0x6000
LLVM_ANNOTATION_TAGS = frozenset({"DW_TAG_LLVM_annotation", DW_TAG_LLVM_ANNOTATION})

# GCC: annotation DIE chain referenced from the annotated DIE
DW_TAG_GNU_ANNOTATION = 0x6001
GNU_ANNOTATION_TAGS = frozenset({"DW_TAG_GNU_annotation", DW_TAG_GNU_ANNOTATION})

DW_AT_GNU_ANNOTATION = 0x2117
GNU_ANNOTATION_ATTRIBUTES = ("DW_AT_GNU_annotation", DW_AT_GNU_ANNOTATION)

# Annotation kind carrying user markers
BTF_DECL_TAG = "btf_decl_tag"
