"""In-memory stores hand out copies."""

from carbontrack.stores import InMemoryActivityStore, InMemoryUserStore
from carbontrack.activities.schemas import Activity
from carbontrack.users.schemas import User


class TestInMemoryStores:
    def test_get_returns_copy(self):
        store = InMemoryUserStore([User(id="u1", username="alice")])
        user = store.get("u1")
        user.stats.streak_days = 9
        assert store.get("u1").stats.streak_days == 0

    def test_save_then_get(self):
        store = InMemoryUserStore()
        store.save(User(id="u1", username="alice", country="US"))
        assert store.get("u1").country == "US"
        assert store.get("missing") is None

    def test_delete(self):
        store = InMemoryUserStore([User(id="u1", username="alice")])
        assert store.delete("u1") is True
        assert store.delete("u1") is False
        assert len(store) == 0

    def test_list_for_user(self):
        store = InMemoryActivityStore()
        for uid in ("a", "a", "b"):
            store.save(Activity(
                user_id=uid, category="food", subcategory="beef", title="t",
                quantity=1, unit="kg", emission_factor=1, total_emissions=1,
            ))
        assert len(store.list_for_user("a")) == 2
        assert store.list_for_user("c") == []
