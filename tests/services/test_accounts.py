import pytest

from exceptions import AccountStoreError, NotEnoughMoney, UserNotFound
from models.operation import Operation
from services.accounts import AccountStore


class TestAccountStore:
    """Tests for AccountStore."""

    def test_new_store_is_empty(self, store):
        """Test a new store has no accounts."""
        assert len(store) == 0
        assert store.list_all() == []

    def test_create_account(self, store):
        """Test creating a new account."""
        assert store.create("Alice") is True

        entry = store.balance_of("Alice")
        assert entry.balance == 0
        assert entry.recent_operations == []

    def test_create_duplicate_keeps_balance(self, store):
        """Test creating a duplicate name leaves the original untouched."""
        store.create("Alice")
        store.deposit("Alice", 70)

        assert store.create("Alice") is False
        assert store.balance_of("Alice").balance == 70

    def test_remove_account(self, store):
        """Test removing returns the final entry."""
        store.create("Bob")
        store.deposit("Bob", 100)

        removed = store.remove("Bob")

        assert removed.balance == 100
        assert removed.recent_operations == [Operation.deposit(100)]
        assert "Bob" not in store

    def test_remove_nonexistent_account(self, store):
        """Test removing a missing account returns None."""
        assert store.remove("Bob") is None

    def test_remove_twice(self, store):
        """Test the second removal reports not found."""
        store.create("Bob")

        assert store.remove("Bob") is not None
        assert store.remove("Bob") is None

    def test_deposit_missing_account(self, store):
        """Test depositing to a missing account raises UserNotFound."""
        with pytest.raises(UserNotFound) as exc_info:
            store.deposit("Dana", 100)

        assert exc_info.value.name == "Dana"
        assert "Dana" not in store

    def test_withdraw_missing_account(self, store):
        """Test withdrawing from a missing account raises UserNotFound."""
        with pytest.raises(UserNotFound):
            store.withdraw("Dana", 50)

    def test_withdraw(self, store):
        """Test a withdrawal within the balance."""
        store.create("Alice")
        store.deposit("Alice", 100)

        store.withdraw("Alice", 40)

        entry = store.balance_of("Alice")
        assert entry.balance == 60
        assert entry.recent_operations == [
            Operation.deposit(100),
            Operation.withdraw(40),
        ]

    def test_withdraw_not_enough_money(self, store):
        """Test over-withdrawal reports amounts and changes nothing."""
        store.create("Alice")
        store.deposit("Alice", 50)

        with pytest.raises(NotEnoughMoney) as exc_info:
            store.withdraw("Alice", 100)

        assert exc_info.value.required == 100
        assert exc_info.value.available == 50
        entry = store.balance_of("Alice")
        assert entry.balance == 50
        assert entry.recent_operations == [Operation.deposit(50)]

    def test_error_messages(self):
        """Test store errors render readable messages."""
        assert str(UserNotFound("Alice")) == "Account 'Alice' not found"
        assert (
            str(NotEnoughMoney(required=100, available=50))
            == "Not enough money: required 100, available 50"
        )

    def test_balance_of_missing(self, store):
        """Test balance_of returns None for a missing account."""
        assert store.balance_of("Dana") is None

    def test_balance_of_returns_copy(self, store):
        """Test mutating a snapshot does not change the store."""
        store.create("Alice")
        store.deposit("Alice", 10)

        snapshot = store.balance_of("Alice")
        snapshot.balance = 1_000_000
        snapshot.recent_operations.clear()

        entry = store.balance_of("Alice")
        assert entry.balance == 10
        assert len(entry.recent_operations) == 1

    def test_list_all(self, store):
        """Test list_all covers every account."""
        store.create("John")
        store.create("Alice")
        store.deposit("John", 150)
        store.deposit("Alice", 300)

        assert sorted(store.list_all()) == [("Alice", 300), ("John", 150)]

    def test_history_limit_applies_to_new_entries(self):
        """Test the store passes its history limit to each entry."""
        store = AccountStore(history_limit=2)
        store.create("Alice")

        for amount in (1, 2, 3):
            store.deposit("Alice", amount)

        entry = store.balance_of("Alice")
        assert entry.balance == 6
        assert entry.recent_operations == [Operation.deposit(2), Operation.deposit(3)]

    def test_entry_and_open_entry(self, store):
        """Test live entry accessors."""
        assert store.entry("Alice") is None

        entry = store.open_entry("Alice")

        assert store.entry("Alice") is entry
        assert store.open_entry("Alice") is entry


class TestApplyBatch:
    """Tests for AccountStore.apply_batch."""

    def test_batch_success(self, store):
        """Test a batch where every operation succeeds."""
        store.create("Alice")
        store.create("Bob")

        store.apply_batch(
            [
                (True, "Alice", 100),
                (True, "Bob", 200),
                (False, "Alice", 50),
            ]
        )

        assert store.balance_of("Alice").balance == 50
        assert store.balance_of("Bob").balance == 200

    def test_batch_user_not_found(self, store):
        """Test the batch stops at a missing account and keeps earlier effects."""
        store.create("Alice")

        with pytest.raises(UserNotFound) as exc_info:
            store.apply_batch(
                [
                    (True, "Alice", 100),
                    (True, "Unknown", 50),
                    (True, "Alice", 1),
                ]
            )

        assert exc_info.value.name == "Unknown"
        assert store.balance_of("Alice").balance == 100

    def test_batch_not_enough_money(self, store):
        """Test the batch stops at an over-withdrawal."""
        store.create("Alice")
        store.deposit("Alice", 50)

        with pytest.raises(NotEnoughMoney) as exc_info:
            store.apply_batch([(False, "Alice", 100)])

        assert exc_info.value.required == 100
        assert exc_info.value.available == 50

    def test_batch_errors_share_base(self, store):
        """Test batch errors belong to the store error family."""
        with pytest.raises(AccountStoreError):
            store.apply_batch([(True, "Nobody", 1)])

    def test_empty_batch(self, store):
        """Test an empty batch does nothing."""
        store.apply_batch([])

        assert len(store) == 0


class TestSeedAndExport:
    """Tests for seeding from and exporting to snapshot pairs."""

    def test_round_trip(self, store):
        """Test seeding then exporting yields the same pairs."""
        rows = [("John", 100), ("Alice", 200), ("Bob", 50), ("Big", 10_000_000_000)]

        store.seed(rows)

        assert sorted(store.export()) == sorted(rows)

    def test_seeded_entries_have_empty_history(self, store):
        """Test seeded balances are opening balances without history."""
        store.seed([("John", 100)])

        entry = store.balance_of("John")
        assert entry.balance == 100
        assert entry.recent_operations == []

    def test_seed_overwrites_existing(self, store):
        """Test seeding replaces an existing account."""
        store.create("John")
        store.deposit("John", 5)

        store.seed([("John", 100)])

        assert store.balance_of("John").balance == 100

    def test_seed_negative_balance(self, store):
        """Test a negative opening balance is rejected."""
        with pytest.raises(ValueError, match="Negative opening balance"):
            store.seed([("John", -1)])
