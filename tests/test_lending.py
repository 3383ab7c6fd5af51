import random

import pytest

from libcatalog import ErrorCode, Library, Role


def snapshot(lib):
    users = sorted(lib.list_users(), key=lambda u: u["user_id"])
    return lib.list_books(), users


def test_borrow_return_round_trip(dune_lib):
    borrowed = dune_lib.borrow(1, "ISBN1")
    assert borrowed.success
    assert borrowed.user_name == "Alice"
    assert borrowed.title == "Dune"
    assert borrowed.message == 'Alice borrowed "Dune".'
    assert dune_lib.list_books()[0]["available"] is False

    returned = dune_lib.return_book(1, "ISBN1")
    assert returned.success
    assert returned.message == 'Alice returned "Dune".'
    assert dune_lib.list_books()[0]["available"] is True
    assert dune_lib.list_users()[0]["borrowed_identifiers"] == []


def test_double_borrow_rejected(dune_lib):
    dune_lib.register_user("Bob", Role.FACULTY)
    assert dune_lib.borrow(1, "ISBN1")
    before = snapshot(dune_lib)

    for user_id in (1, 2):
        result = dune_lib.borrow(user_id, "ISBN1")
        assert not result.success
        assert result.error is ErrorCode.ALREADY_BORROWED
        assert result.message == 'Error: Book "Dune" is already borrowed.'
    assert snapshot(dune_lib) == before


def test_return_without_borrow_rejected(dune_lib):
    before = snapshot(dune_lib)

    result = dune_lib.return_book(1, "ISBN1")
    assert result.error is ErrorCode.NEVER_BORROWED
    assert result.message == 'Error: Book "Dune" was never borrowed.'
    assert snapshot(dune_lib) == before


@pytest.mark.parametrize("operation", ["borrow", "return_book"])
def test_unknown_references_rejected(dune_lib, operation):
    before = snapshot(dune_lib)
    call = getattr(dune_lib, operation)

    missing_user = call(999, "ISBN1")
    assert missing_user.error is ErrorCode.USER_NOT_FOUND
    assert missing_user.message == "Error: User not found."

    missing_book = call(1, "nonexistent-id")
    assert missing_book.error is ErrorCode.BOOK_NOT_FOUND
    assert missing_book.message == "Error: Book with ISBN nonexistent-id not found."

    assert snapshot(dune_lib) == before


def test_user_is_checked_before_book(lib):
    assert lib.borrow(5, "nonexistent-id").error is ErrorCode.USER_NOT_FOUND


def test_scenario():
    lib = Library()
    lib.add_book("Dune", "Herbert", "ISBN1")
    assert lib.register_user("Alice", Role.STUDENT) == 1

    assert lib.borrow(1, "ISBN1").success
    assert lib.list_books()[0]["available"] is False

    assert lib.borrow(2, "ISBN1").error is ErrorCode.USER_NOT_FOUND

    assert lib.return_book(1, "ISBN1").success
    assert lib.list_books()[0]["available"] is True


def test_permissive_return_by_other_user_keeps_invariant(dune_lib):
    dune_lib.register_user("Bob", Role.FACULTY)
    dune_lib.borrow(1, "ISBN1")

    result = dune_lib.return_book(2, "ISBN1")
    assert result.success
    assert result.user_name == "Bob"
    assert dune_lib.list_books()[0]["available"] is True
    assert all(u["borrowed_identifiers"] == [] for u in dune_lib.list_users())
    assert dune_lib.check_invariant() == []


def test_strict_return_by_user_holding_nothing():
    lib = Library(strict_returns=True)
    lib.add_book("Dune", "Herbert", "ISBN1")
    lib.register_user("Alice", Role.STUDENT)
    lib.register_user("Bob", Role.FACULTY)
    lib.borrow(1, "ISBN1")
    before = snapshot(lib)

    result = lib.return_book(2, "ISBN1")
    assert result.error is ErrorCode.NOTHING_BORROWED
    assert result.message == "Error: No borrowed books to return."
    assert snapshot(lib) == before


def test_strict_return_of_book_held_by_someone_else():
    lib = Library(strict_returns=True)
    lib.add_book("Dune", "Herbert", "ISBN1")
    lib.add_book("Emma", "Austen", "ISBN2")
    lib.register_user("Alice", Role.STUDENT)
    lib.register_user("Bob", Role.FACULTY)
    lib.borrow(1, "ISBN1")
    lib.borrow(2, "ISBN2")

    result = lib.return_book(2, "ISBN1")
    assert result.error is ErrorCode.NOT_BORROWED_BY_USER
    assert result.message == "Error: Book with ISBN ISBN1 not found in borrowed books."
    assert lib.return_book(1, "ISBN1").success


def test_return_of_orphaned_loan_still_frees_book(dune_lib, caplog):
    # book flagged as borrowed without any holder
    dune_lib.catalog.mark_borrowed("ISBN1")

    with caplog.at_level("ERROR", logger="libcatalog.lending"):
        result = dune_lib.return_book(1, "ISBN1")
    assert result.success
    assert dune_lib.check_invariant() == []
    assert "no user holds it" in caplog.text


def test_invariant_holds_over_random_sequence():
    rng = random.Random(7)
    lib = Library()
    identifiers = [f"ISBN{i}" for i in range(5)]
    for identifier in identifiers:
        lib.add_book(f"Title {identifier}", "Author", identifier)
    for name in ("Alice", "Bob", "Carol"):
        lib.register_user(name, rng.choice(list(Role)))

    for _ in range(200):
        user_id = rng.randint(1, 4)
        identifier = rng.choice(identifiers + ["missing"])
        if rng.random() < 0.5:
            lib.borrow(user_id, identifier)
        else:
            lib.return_book(user_id, identifier)
        assert lib.check_invariant() == []


def test_result_to_dict(dune_lib):
    assert dune_lib.borrow(999, "ISBN1").to_dict() == {
        "success": False,
        "message": "Error: User not found.",
        "user_name": None,
        "title": None,
        "error": "UserNotFound",
    }


def test_padded_identifier_round_trip(lib):
    lib.add_book("Dune", "Herbert", " ISBN1 ")
    lib.register_user("Alice", Role.STUDENT)

    assert lib.borrow(1, " ISBN1 ").success
    assert lib.list_users()[0]["borrowed_identifiers"] == ["ISBN1"]
    assert lib.return_book(1, "ISBN1  ").success
    assert lib.check_invariant() == []
