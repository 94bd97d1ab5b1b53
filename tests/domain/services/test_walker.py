"""Tests for the aggregate walk: qualified names, offsets and deduplication."""

import pytest

from offset_extractor.domain.models.layout import AggregateKind, TypeRef
from offset_extractor.errors import AlignmentError, InvariantViolation, NameBufferOverflow
from tests.helpers import field, nested


@pytest.mark.unit
class TestOffsetWalker:
    """Walk behaviour on hand-built layouts."""

    def test_point_struct_in_bytes(self, make_aggregate, make_walker, sink):
        """struct Point { int x; int y; } with both fields marked."""
        point = make_aggregate("Point", [field("x", 0, marked=True), field("y", 32, marked=True)])

        make_walker().visit_top_level(point)

        assert sink.lines == ["Point::x 0", "Point::y 4"]

    def test_anonymous_union_adds_no_segment(self, make_aggregate, make_walker, sink):
        """struct S { union { int a; int b; }; } with a marked."""
        union = make_aggregate(
            None, [field("a", 0, marked=True), field("b", 0)], kind=AggregateKind.UNION
        )
        s = make_aggregate("S", [nested(None, 0, union)])

        make_walker().visit_top_level(s)

        assert sink.lines == ["S::a 0"]

    def test_offsets_accumulate_through_anonymous_members(
        self, make_aggregate, make_walker, sink
    ):
        inner = make_aggregate(None, [field("deep", 16, marked=True)])
        middle = make_aggregate(None, [field("pad", 0), nested(None, 64, inner)])
        outer = make_aggregate("Outer", [field("head", 0), nested(None, 32, middle)])

        make_walker().visit_top_level(outer)

        assert sink.lines == ["Outer::deep 14"]

    def test_named_member_of_anonymous_type_adds_segment(
        self, make_aggregate, make_walker, sink
    ):
        """struct S { int a; struct { int v; } inner; } exports S::inner::v."""
        anon = make_aggregate(None, [field("v", 32, marked=True)])
        s = make_aggregate("S", [field("a", 0), nested("inner", 32, anon)])

        make_walker().visit_top_level(s)

        assert sink.lines == ["S::inner::v 8"]

    def test_named_nested_aggregate_is_not_descended(self, make_aggregate, make_walker, sink):
        inner = make_aggregate("Inner", [field("v", 8, marked=True)])
        outer = make_aggregate("Outer", [nested("in", 64, inner)])
        walker = make_walker()

        walker.visit_top_level(outer)
        assert sink.lines == []

        walker.visit_top_level(inner)
        assert sink.lines == ["Inner::v 1"]

    def test_output_interleaves_in_declaration_order(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("b", 0, marked=True), field("c", 32, marked=True)])
        s = make_aggregate(
            "S",
            [field("a", 0, marked=True), nested(None, 32, anon), field("d", 96, marked=True)],
        )

        make_walker().visit_top_level(s)

        assert sink.lines == ["S::a 0", "S::b 4", "S::c 8", "S::d 12"]

    def test_marked_field_of_named_aggregate_type_is_exported(
        self, make_aggregate, make_walker, sink
    ):
        inner = make_aggregate("Inner", [field("v", 0)])
        outer = make_aggregate("Outer", [field("x", 0), nested("in", 64, inner)])
        outer.fields[1].attributes = ("extract_offset",)

        make_walker().visit_top_level(outer)

        assert sink.lines == ["Outer::in 8"]

    def test_unmarked_aggregate_produces_nothing(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("a", 0), field("b", 32)])
        s = make_aggregate("Quiet", [field("x", 0), nested(None, 32, anon)])

        make_walker().visit_top_level(s)

        assert sink.lines == []

    def test_artificial_fields_are_skipped(self, make_aggregate, make_walker, sink):
        s = make_aggregate(
            "Derived",
            [field(None, 0, marked=True, artificial=True), field("x", 64, marked=True)],
        )

        make_walker().visit_top_level(s)

        assert sink.lines == ["Derived::x 8"]

    def test_other_marker_names_do_not_match(self, make_aggregate, make_walker, sink):
        s = make_aggregate("S", [field("x", 0, marked=True)])

        make_walker(marker="Extract_Offset").visit_top_level(s)

        assert sink.lines == []

    def test_capitalize_prefix_and_separator(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("count", 32, marked=True)])
        s = make_aggregate("my_struct", [nested("inner", 0, anon)])

        make_walker(separator="_", prefix="OFFSET_", capitalize=True).visit_top_level(s)

        assert sink.lines == ["OFFSET_MY_STRUCT_INNER_COUNT 4"]

    def test_capitalize_upper_cases_letter_separator(self, make_aggregate, make_walker, sink):
        s = make_aggregate("outer", [field("x", 0, marked=True)])

        make_walker(separator="_of_", capitalize=True).visit_top_level(s)

        assert sink.lines == ["OUTER_OF_X 0"]

    def test_capitalized_macro_name(self, make_aggregate, make_walker, sink):
        s = make_aggregate("outer", [field("x", 32, marked=True)])

        make_walker(
            separator="_of_", prefix="off", capitalize=True, output_format="macro",
        ).visit_top_level(s)

        assert sink.lines == ["#define off_OF_OUTER_OF_X (4)"]

    def test_bit_output(self, make_aggregate, make_walker, sink):
        s = make_aggregate("Flags", [field("a", 0, marked=True), field("b", 3, marked=True)])

        make_walker(output_bits=True).visit_top_level(s)

        assert sink.lines == ["Flags::a 0", "Flags::b 3"]


@pytest.mark.unit
class TestOffsetWalkerDeduplication:
    """Registry guard against walking an aggregate twice."""

    def test_redelivered_event_emits_nothing_new(self, make_aggregate, make_walker, sink):
        point = make_aggregate("Point", [field("x", 0, marked=True)])
        walker = make_walker()

        walker.visit_top_level(point)
        walker.visit_top_level(point)

        assert sink.lines == ["Point::x 0"]

    def test_anonymous_top_level_aggregate_is_skipped(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("x", 0, marked=True)])

        make_walker().visit_top_level(anon)

        assert sink.lines == []

    def test_anonymous_event_after_parent_stays_silent(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("a", 0, marked=True)])
        s = make_aggregate("S", [nested(None, 0, anon)])
        walker = make_walker()

        walker.visit_top_level(s)
        walker.visit_top_level(anon)

        assert sink.lines == ["S::a 0"]

    def test_shared_anonymous_type_flattened_under_first_parent_only(
        self, make_aggregate, make_walker, sink
    ):
        shared = make_aggregate(None, [field("payload", 0, marked=True)])
        first = make_aggregate("First", [nested(None, 0, shared)])
        second = make_aggregate("Second", [nested(None, 32, shared)])
        walker = make_walker()

        walker.visit_top_level(first)
        walker.visit_top_level(second)

        assert sink.lines == ["First::payload 0"]

    def test_path_is_restored_between_events(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("b", 0, marked=True)])
        a = make_aggregate("A", [nested("m", 0, anon)])
        b = make_aggregate("B", [field("c", 8, marked=True)])
        walker = make_walker(output_bits=True)

        walker.visit_top_level(a)
        walker.visit_top_level(b)

        assert sink.lines == ["A::m::b 0", "B::c 8"]
        assert walker.context.path.path == ""


@pytest.mark.unit
class TestOffsetWalkerFatalConditions:
    """Conditions aborting the run."""

    def test_misaligned_field_in_byte_mode(self, make_aggregate, make_walker, sink):
        s = make_aggregate("Bits", [field("a", 0, marked=True), field("b", 3, marked=True)])

        with pytest.raises(AlignmentError) as exc_info:
            make_walker().visit_top_level(s)

        assert exc_info.value.path == "Bits::b"
        assert exc_info.value.offset_bits == 3
        # Records before the failure were already written
        assert sink.lines == ["Bits::a 0"]

    def test_unnamed_marked_field(self, make_aggregate, make_walker, sink):
        s = make_aggregate("S", [field(None, 0, marked=True, bit_size=3)])

        with pytest.raises(InvariantViolation, match="unnamed field"):
            make_walker().visit_top_level(s)

        assert sink.lines == []

    def test_path_overflow_before_any_record(self, make_aggregate, make_walker, sink):
        s = make_aggregate("VeryLongStructName", [field("x", 0, marked=True)])

        with pytest.raises(NameBufferOverflow) as exc_info:
            make_walker(max_length=8).visit_top_level(s)

        assert sink.lines == []
        assert exc_info.value.max_length == 8
        assert "max_length=16" in str(exc_info.value)

    def test_macro_format_rejects_deep_names(self, make_aggregate, make_walker, sink):
        anon = make_aggregate(None, [field("v", 0, marked=True)])
        s = make_aggregate("S", [nested("inner", 0, anon)])

        with pytest.raises(InvariantViolation, match="3 segments"):
            make_walker(output_format="macro").visit_top_level(s)

    def test_scalar_field_named_like_aggregate_is_not_descended(
        self, make_aggregate, make_walker, sink
    ):
        s = make_aggregate("S", [field("p", 0, type_ref=TypeRef.scalar("struct S *"))])

        make_walker().visit_top_level(s)

        assert sink.lines == []
