from datetime import datetime, timezone

import pytest

from agents.errors import DuplicateTestCaseError
from models.test_case_model import Priority, TestCase, TestStatus, TestStep
from models.test_library import TestLibrary


def case(case_id, title="Case", status=TestStatus.DRAFT):
    return TestCase(
        id=case_id,
        title=title,
        description="d",
        preconditions="p",
        priority=Priority.LOW,
        steps=[TestStep(1, "act", "see")],
        status=status,
        created_at=datetime.now(timezone.utc),
        traceability_id=f"REQ-GEN-{case_id}",
    )


def ids(lib):
    return [tc.id for tc in lib.all()]


def test_seed_library(library):
    assert ids(library) == ["tc-001", "tc-002"]


def test_accept_prepends_generated_batch(library, generator):
    batch = generator.generate("Auto logout after 15 minutes.", ["HIPAA"])
    library.accept(batch)

    cases = library.all()
    assert len(cases) == 5
    assert [tc.id for tc in cases[:3]] == [tc.id for tc in batch]
    assert [tc.id for tc in cases[3:]] == ["tc-001", "tc-002"]
    seed_trace = {tc.traceability_id for tc in cases[3:]}
    for tc in cases[:3]:
        assert tc.status is TestStatus.DRAFT
        assert tc.traceability_id not in seed_trace


def test_two_batches_newest_first(library):
    a = [case("a1"), case("a2")]
    b = [case("b1"), case("b2"), case("b3")]
    library.accept(a)
    library.accept(b)
    assert ids(library) == ["b1", "b2", "b3", "a1", "a2", "tc-001", "tc-002"]


def test_existing_entries_untouched(library):
    before = library.all()
    library.accept([case("x")])
    assert library.all()[1:] == before
    assert library.all()[1] is before[0]


def test_no_content_dedupe():
    lib = TestLibrary()
    lib.accept([case("one", title="Same"), case("two", title="Same")])
    assert len(lib) == 2


def test_all_is_repeatable_and_a_snapshot(library):
    first = library.all()
    assert library.all() == first
    first.clear()
    assert len(library.all()) == 2


@pytest.mark.parametrize("batch", [
    [case("tc-001")],
    [case("new"), case("new")],
])
def test_duplicate_ids_rejected_without_change(library, batch):
    with pytest.raises(DuplicateTestCaseError):
        library.accept(batch)
    assert ids(library) == ["tc-001", "tc-002"]


def test_get(library):
    assert library.get("tc-002").title == "Patient Data Encryption at Rest"
    assert library.get("missing") is None


def test_accept_empty_batch(library):
    library.accept([])
    assert len(library) == 2
