"""Unit tests for the ORM models defined in learnhub.models.

These tests verify mapping correctness: table names, the composite participant
key, the unique pair key and that relationships are instrumented attributes.
"""

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import attributes

from learnhub.models import (
    ROLE_STUDENT,
    ROLE_TEACHER,
    Chat,
    Message,
    User,
    chat_participant,
    pair_key_for,
)


def test_table_names():
    """Model classes expose expected __tablename__ values."""
    assert User.__tablename__ == "user_account"
    assert Chat.__tablename__ == "chat"
    assert Message.__tablename__ == "message"
    assert chat_participant.name == "chat_participant"


def test_participant_composite_primary_key():
    """Participant rows are keyed on (chat_id, user_id)."""
    pk_names = {c.name for c in chat_participant.primary_key}
    assert pk_names == {"chat_id", "user_id"}


def test_pair_key_is_unique_constraint():
    constraint_names = {c.name for c in Chat.__table__.constraints}
    assert "uq_chat_pair_key" in constraint_names


def test_pair_key_is_order_independent():
    assert pair_key_for(7, 3) == pair_key_for(3, 7) == "3:7"


def test_relationships_are_instrumented_attributes():
    for attr in (Chat.participants, Chat.initiator, Chat.recipient, Message.author):
        assert isinstance(attr, attributes.InstrumentedAttribute)


def test_duplicate_pair_key_rejected(db_session, alice, bob):
    """The store refuses a second chat row for the same unordered pair."""
    db_session.add(Chat(initiator_id=alice.id, recipient_id=bob.id, pair_key=pair_key_for(alice.id, bob.id)))
    db_session.commit()

    db_session.add(Chat(initiator_id=bob.id, recipient_id=alice.id, pair_key=pair_key_for(bob.id, alice.id)))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_participant_ids_property(db_session, alice, bob):
    chat = Chat(initiator_id=alice.id, recipient_id=bob.id, pair_key=pair_key_for(alice.id, bob.id))
    chat.participants = [alice, bob]
    db_session.add(chat)
    db_session.commit()

    assert chat.is_direct
    assert chat.participant_ids == {alice.id, bob.id}


def test_public_chat_is_not_direct(public_chat):
    assert not public_chat.is_direct
    assert public_chat.participant_ids == set()


def test_user_role_defaults_and_validation(make_user):
    assert make_user("learner").role == ROLE_STUDENT
    assert make_user("mentor", role=ROLE_TEACHER).role == ROLE_TEACHER

    with pytest.raises(ValueError):
        User(username="wizard", role="wizard")
