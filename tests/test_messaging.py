import smtplib

import pytest
from django.core.exceptions import PermissionDenied, ValidationError

from accounts.models import User
from messaging import services
from messaging.models import Message, Notification
from messaging.services import MessageDeliveryError

pytestmark = pytest.mark.django_db


def test_message_to_intern_mails_and_records(hr_user, intern_with_account, mailoutbox):
    message = services.send_message_to_intern(hr_user, intern_with_account.id, "Schedule", "Stand-up moves to 10am.")

    assert message.message_type == Message.HR_TO_INTERN
    assert message.recipient == intern_with_account.account
    assert len(mailoutbox) == 1
    assert mailoutbox[0].subject == "[Internship Message] Schedule"
    assert "Stand-up moves to 10am." in mailoutbox[0].body
    assert "Helen Ross" in mailoutbox[0].body

    notification = Notification.objects.get(user=intern_with_account.account)
    assert notification.type == Notification.MESSAGE_FROM_HR
    assert notification.intern == intern_with_account


def test_undeliverable_message_is_not_stored(hr_user, intern_with_account, monkeypatch):
    def refuse(to, subject, body):
        raise smtplib.SMTPRecipientsRefused({to: (550, b"no such user")})

    monkeypatch.setattr(services, "send_email", refuse)

    with pytest.raises(MessageDeliveryError):
        services.send_message_to_intern(hr_user, intern_with_account.id, "Hi", "Hello")

    assert not Message.objects.exists()
    assert not Notification.objects.exists()


def test_bulk_message_reports_each_intern(hr_user, intern_with_account, make_intern, mailoutbox):
    other = make_intern()

    outcomes = services.send_message_to_interns(
        hr_user, [intern_with_account.id, 999999, other.id], "Reminder", "Timesheets are due."
    )

    assert [o.sent for o in outcomes] == [True, False, True]
    assert outcomes[1].reason == "Intern not found"
    assert outcomes[0].message_id is not None
    assert len(mailoutbox) == 2
    # interns without an account get mail but no in-app notification
    assert Notification.objects.count() == 1


def test_message_to_all_active_skips_finished_interns(hr_user, make_intern, mailoutbox):
    active = make_intern()
    make_intern(status="COMPLETED")

    outcomes = services.send_message_to_all_active(hr_user, "Party", "Friday at 4.")

    assert [o.intern_id for o in outcomes] == [active.id]
    assert [m.to for m in mailoutbox] == [[active.email]]


def test_intern_writes_to_hr(hr_user, intern_with_account, mailoutbox):
    message = services.send_message_to_hr(intern_with_account.account, hr_user.id, "Leave", "Out on Monday.")

    assert message.message_type == Message.INTERN_TO_HR
    assert message.intern == intern_with_account
    assert mailoutbox[0].to == ["hr@example.com"]
    assert Notification.objects.get(user=hr_user).type == Notification.MESSAGE_FROM_INTERN


def test_intern_cannot_write_to_another_intern(intern_with_account):
    peer = User.objects.create_user("peer@example.com", "Peer-pass-1234", role=User.INTERN)

    with pytest.raises(ValidationError):
        services.send_message_to_hr(intern_with_account.account, peer.id, "Hey", "Lunch?")


def test_message_visibility(hr_user, other_hr, intern_with_account):
    message = services.send_message_to_intern(hr_user, intern_with_account.id, "Docs", "Upload your CV.")

    assert services.get_message(hr_user, message.id) == message
    assert services.get_message(intern_with_account.account, message.id) == message
    with pytest.raises(PermissionDenied):
        services.get_message(other_hr, message.id)

    rows, total = services.list_messages(intern_with_account.account)
    assert total == 1
    assert rows == [message]
    assert services.list_messages(other_hr) == ([], 0)


def test_mark_read_and_delete_message(hr_user, intern_with_account):
    message = services.send_message_to_intern(hr_user, intern_with_account.id, "Docs", "Upload your CV.")

    services.mark_message_read(intern_with_account.account, message.id)
    message.refresh_from_db()
    assert message.is_read

    services.delete_message(hr_user, message.id)
    assert not Message.objects.exists()


def test_notifications_are_deduplicated_per_intern(intern_with_account):
    user = intern_with_account.account

    first = services.create_notification("Ending", "Ends in 7 days", Notification.INTERNSHIP_ENDING, user, intern_with_account)
    second = services.create_notification("Ending", "Ends in 7 days", Notification.INTERNSHIP_ENDING, user, intern_with_account)
    services.create_notification("Ending", "Ends in 1 days", Notification.INTERNSHIP_ENDING, user, intern_with_account)

    assert first == second
    assert Notification.objects.count() == 2


def test_notification_listing_and_reading(hr_user, other_hr):
    for n in range(3):
        services.create_notification(f"Note {n}", "body", Notification.MESSAGE_FROM_INTERN, hr_user)

    rows, total = services.list_notifications(hr_user, page=0, size=2)
    assert total == 3
    assert len(rows) == 2
    assert services.unread_count(hr_user) == 3

    services.mark_notification_read(hr_user, rows[0].id)
    assert services.unread_count(hr_user) == 2

    with pytest.raises(PermissionDenied):
        services.mark_notification_read(other_hr, rows[1].id)


def test_paginate_rejects_bad_values(hr_user):
    with pytest.raises(ValidationError):
        services.list_notifications(hr_user, page=-1)
    with pytest.raises(ValidationError):
        services.list_notifications(hr_user, size=0)


def test_send_email_raises_when_nothing_was_sent(monkeypatch):
    monkeypatch.setattr(services, "send_mail", lambda *args, **kwargs: 0)

    with pytest.raises(MessageDeliveryError):
        services.send_email("x@example.com", "Subject", "Body")


def test_bulk_message_continues_after_unexpected_error(hr_user, make_intern, monkeypatch, mailoutbox):
    first = make_intern()
    second = make_intern()
    real_send = services.send_email

    def flaky_send(to, subject, body):
        if to == first.email:
            raise RuntimeError("backend blew up")
        return real_send(to, subject, body)

    monkeypatch.setattr(services, "send_email", flaky_send)

    outcomes = services.send_message_to_interns(hr_user, [first.id, second.id], "Reminder", "Timesheets.")

    assert [o.sent for o in outcomes] == [False, True]
    assert outcomes[0].reason == "backend blew up"
    assert [m.to for m in mailoutbox] == [[second.email]]
    assert list(Message.objects.values_list("intern_id", flat=True)) == [second.id]
