"""Record store tests over an in-memory SQLite database."""

import pytest

from alumni_hub.exceptions import (
    AccessDeniedError,
    DuplicateRecordError,
    InvalidOperationError,
    RecordNotFoundError,
)
from alumni_hub.services.seed import DEFAULT_USERS, seed_default_data


def _create_alumnus(db, email="ada@university.edu", **profile):
    return db.create_user(
        email=email,
        password="secret1",
        name="Ada Lovelace",
        user_type="alumni",
        **profile,
    )


class TestUsers:
    def test_create_and_fetch(self, db):
        user = _create_alumnus(db, major="Mathematics", skills=["Analysis"])

        fetched = db.get_user(user.id)
        assert fetched.id == user.id
        assert fetched.email == "ada@university.edu"
        assert fetched.role.value == "alumni"
        assert fetched.skills == ["Analysis"]

    def test_management_accounts_are_admins(self, db):
        user = db.create_user(
            email="dean@university.edu", password="secret1", name="Dean", user_type="management"
        )
        assert user.role.value == "admin"

    def test_duplicate_email_is_rejected(self, db):
        _create_alumnus(db)
        with pytest.raises(DuplicateRecordError):
            _create_alumnus(db)

    def test_authenticate(self, db):
        user = _create_alumnus(db)
        assert db.authenticate_user("ada@university.edu", "secret1").id == user.id
        assert db.authenticate_user("ada@university.edu", "wrong") is None

    def test_update_keeps_identity_fields(self, db):
        user = _create_alumnus(db)
        updated = db.update_user(
            user.id,
            {"company": "Analytical Engines", "email": "other@x.com", "name": None},
        )

        assert updated.company == "Analytical Engines"
        assert updated.email == "ada@university.edu"
        assert updated.name == "Ada Lovelace"

    def test_user_type_change_rederives_role(self, db):
        user = _create_alumnus(db)

        promoted = db.update_user(user.id, {"user_type": "management"})
        assert promoted.role.value == "admin"

        demoted = db.update_user(user.id, {"user_type": "teacher"})
        assert demoted.role.value == "teacher"

    def test_explicit_role_is_kept(self, db):
        user = _create_alumnus(db)
        updated = db.update_user(user.id, {"user_type": "student", "role": "admin"})
        assert updated.role.value == "admin"

    def test_update_unknown_user(self, db):
        with pytest.raises(RecordNotFoundError):
            db.update_user("missing", {"company": "X"})

    def test_persons_listed_in_insertion_order(self, db):
        first = _create_alumnus(db, email="a@university.edu")
        second = _create_alumnus(db, email="b@university.edu")
        assert [p.id for p in db.list_all_persons()] == [first.id, second.id]


class TestSeed:
    def test_seed_populates_empty_store(self, db):
        assert seed_default_data(db) is True
        assert db.count_users() == len(DEFAULT_USERS)
        assert db.get_user("user1").name == "John Doe"
        assert len(db.list_events()) == 2
        assert len(db.list_fundraisers()) == 2

    def test_seed_skips_populated_store(self, seeded_db):
        assert seed_default_data(seeded_db) is False
        assert seeded_db.count_users() == len(DEFAULT_USERS)


class TestEvents:
    def test_rsvp_toggles(self, seeded_db):
        event, attending = seeded_db.toggle_rsvp("1", "user1")
        assert attending is True
        assert event.rsvp == 46

        event, attending = seeded_db.toggle_rsvp("1", "user1")
        assert attending is False
        assert event.rsvp == 45

    def test_full_event_rejects_new_attendees(self, db):
        event = db.create_event(
            title="Dinner", date="2025-01-10", location="Hall", created_by="admin1", max_attendees=1
        )
        db.toggle_rsvp(event.id, "u1")

        with pytest.raises(InvalidOperationError):
            db.toggle_rsvp(event.id, "u2")

        # Withdrawing still works when full
        _, attending = db.toggle_rsvp(event.id, "u1")
        assert attending is False

    def test_unknown_event(self, db):
        with pytest.raises(RecordNotFoundError):
            db.toggle_rsvp("missing", "u1")


class TestFundraisers:
    def test_completed_donation_updates_totals(self, seeded_db):
        donation = seeded_db.create_donation("2", "user1", 500, "upi")

        assert donation.transaction_id.startswith("TXN_")
        assert donation.fundraiser_id == "2"
        fundraiser = seeded_db.get_fundraiser("2")
        assert fundraiser.raised == 185500
        assert fundraiser.donors == 90

    def test_pending_donation_leaves_totals(self, seeded_db):
        seeded_db.create_donation("2", "user1", 500, "card", status="pending")
        assert seeded_db.get_fundraiser("2").raised == 185000

    def test_inactive_fundraiser_rejects_donations(self, db):
        fundraiser = db.create_fundraiser(
            title="Old drive", description="Done", goal=100, created_by="admin1", status="completed"
        )
        with pytest.raises(InvalidOperationError):
            db.create_donation(fundraiser.id, "user1", 10, "card")

    def test_donation_listings(self, seeded_db):
        seeded_db.create_donation("1", "user1", 100, "card")
        seeded_db.create_donation("2", "user1", 200, "upi")
        seeded_db.create_donation("2", "user2", 300, "netbanking")

        assert [d.amount for d in seeded_db.list_donations_by_user("user1")] == [100, 200]
        assert [d.user_id for d in seeded_db.list_donations_by_fundraiser("2")] == ["user1", "user2"]

    def test_status_filter(self, seeded_db):
        seeded_db.create_fundraiser(
            title="Old drive", description="Done", goal=100, created_by="admin1", status="completed"
        )
        assert [f.id for f in seeded_db.list_fundraisers(status="active")] == ["1", "2"]
        assert len(seeded_db.list_fundraisers(status="completed")) == 1


class TestMessaging:
    def test_conversation_is_reused(self, seeded_db):
        first = seeded_db.get_or_create_conversation("user1", "user2")
        second = seeded_db.get_or_create_conversation("user2", "user1")
        assert first.id == second.id
        assert sorted(first.participants) == ["user1", "user2"]

    def test_cannot_message_yourself(self, seeded_db):
        with pytest.raises(InvalidOperationError):
            seeded_db.get_or_create_conversation("user1", "user1")

    def test_other_user_must_exist(self, seeded_db):
        with pytest.raises(RecordNotFoundError):
            seeded_db.get_or_create_conversation("user1", "nobody")

    def test_send_and_read(self, seeded_db):
        conversation = seeded_db.get_or_create_conversation("user1", "user2")
        message = seeded_db.create_message(conversation.id, "user1", "  Hello Jane  ")

        assert message.receiver_id == "user2"
        assert message.content == "Hello Jane"
        assert seeded_db.get_conversation(conversation.id).last_message.id == message.id

        assert seeded_db.mark_conversation_read(conversation.id, "user2") == 1
        assert seeded_db.mark_conversation_read(conversation.id, "user2") == 0
        assert all(m.read for m in seeded_db.list_messages(conversation.id))

    def test_blank_message_is_rejected(self, seeded_db):
        conversation = seeded_db.get_or_create_conversation("user1", "user2")
        with pytest.raises(InvalidOperationError):
            seeded_db.create_message(conversation.id, "user1", "   ")

    def test_outsiders_are_denied(self, seeded_db):
        conversation = seeded_db.get_or_create_conversation("user1", "user2")
        with pytest.raises(AccessDeniedError):
            seeded_db.create_message(conversation.id, "user3", "Hi")
        with pytest.raises(AccessDeniedError):
            seeded_db.list_messages(conversation.id, user_id="user3")

    def test_inbox_lists_only_own_conversations(self, seeded_db):
        seeded_db.get_or_create_conversation("user1", "user2")
        seeded_db.get_or_create_conversation("user3", "user4")

        inbox = seeded_db.list_conversations_for_user("user1")
        assert len(inbox) == 1
        assert "user1" in inbox[0].participants


def test_stats(seeded_db):
    seeded_db.create_donation("1", "user1", 100, "card")
    seeded_db.create_donation("2", "user1", 100, "card")

    stats = seeded_db.get_stats()

    assert stats.total_raised == 342500 + 185000 + 200
    assert stats.total_donors == 1
    assert stats.active_campaigns == 2
    assert stats.completed_campaigns == 0
    assert stats.success_rate == 0
    assert stats.total_users == len(DEFAULT_USERS)
    assert stats.total_events == 2
