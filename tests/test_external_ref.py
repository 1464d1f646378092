import pytest

from lms_store.domain.common.exceptions import BackendIdConflictError
from lms_store.domain.external_ref import ExternalRef, normalize_ref

# ============= Tests: normalize_ref =============


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (42, "42"),
        ("42", "42"),
        ("  42 ", "42"),
        ("", None),
        ("   ", None),
        (None, None),
    ],
)
def test_normalize_ref(value, expected):
    """Test numbers and padded strings normalize to the same id"""
    assert normalize_ref(value) == expected


# ============= Tests: matches =============

def test_matches_local_id():
    """Test match by local id"""
    ref = ExternalRef(local_id="c1")

    assert ref.matches("c1")
    assert not ref.matches("c2")


def test_matches_remote_id_given_as_number():
    """Test match by remote id when the API sends a number"""
    ref = ExternalRef(local_id="c1", remote_id="42")

    assert ref.matches(42)
    assert ref.matches("42")
    assert ref.matches("c1")


def test_matches_ignores_empty_candidate():
    """Test empty candidate never matches an unsynced ref"""
    ref = ExternalRef(local_id="c1")

    assert not ref.matches(None)
    assert not ref.matches("")


# ============= Tests: attach =============

def test_attach_sets_remote_id_once():
    """Test first attach binds the normalized remote id"""
    ref = ExternalRef(local_id="c1")

    attached = ref.attach(42)

    assert attached == ExternalRef(local_id="c1", remote_id="42")
    assert attached.is_synced
    assert not ref.is_synced


def test_attach_same_id_is_noop():
    """Test re-attaching the same id keeps the ref"""
    ref = ExternalRef(local_id="c1", remote_id="42")

    assert ref.attach(" 42 ") == ref


def test_attach_different_id_raises():
    """Test rebinding to another remote record is rejected"""
    ref = ExternalRef(local_id="c1", remote_id="42")

    with pytest.raises(BackendIdConflictError) as exc_info:
        ref.attach("43")

    assert exc_info.value.current_backend_id == "42"
    assert exc_info.value.new_backend_id == "43"


def test_attach_cannot_regress_to_none():
    """Test a synced ref cannot lose its remote id"""
    ref = ExternalRef(local_id="c1", remote_id="42")

    with pytest.raises(BackendIdConflictError):
        ref.attach(None)
