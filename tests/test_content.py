"""
Tests for addresses, banners, notifications, collections and users.
"""
from datetime import timedelta, timezone

import pytest

from storefront.core.exceptions import InvalidRequestError, NotFoundError
from storefront.core.utils import utcnow
from storefront.models import NotificationType
from storefront.services import (
    AddressService,
    BannerService,
    CollectionService,
    NotificationService,
    UserService,
)

HOME = {
    "name": "Asha Rao",
    "phone": "+91 98450 00000",
    "address_line_1": "12 MG Road",
    "city": "Bengaluru",
    "state": "Karnataka",
    "pincode": "560001",
}


class TestAddresses:

    @pytest.mark.asyncio
    async def test_single_default_per_user(self, db, user):
        addresses = AddressService(db)
        home = await addresses.create_address(user.id, is_default=True, **HOME)
        office = await addresses.create_address(user.id, is_default=True, **dict(HOME, address_line_1="1 Tech Park"))

        listed = await addresses.list_addresses(user.id)

        assert [a.id for a in listed if a.is_default] == [office.id]
        assert home.is_default is False

        await addresses.update_address(home.id, is_default=True)
        listed = await addresses.list_addresses(user.id)
        assert [a.id for a in listed if a.is_default] == [home.id]

    @pytest.mark.asyncio
    async def test_country_defaults_to_india(self, db, user):
        address = await AddressService(db).create_address(user.id, **HOME)
        assert address.country == "India"

    @pytest.mark.asyncio
    async def test_unknown_user_and_missing_address(self, db):
        addresses = AddressService(db)
        with pytest.raises(NotFoundError):
            await addresses.create_address(404, **HOME)
        with pytest.raises(NotFoundError):
            await addresses.update_address(404, city="Mysuru")
        with pytest.raises(NotFoundError):
            await addresses.delete_address(404)

    @pytest.mark.asyncio
    async def test_delete(self, db, user):
        addresses = AddressService(db)
        address = await addresses.create_address(user.id, **HOME)

        await addresses.delete_address(address.id)

        assert await addresses.list_addresses(user.id) == []


class TestBanners:

    @pytest.mark.asyncio
    async def test_only_live_banners_in_sort_order(self, db):
        banners = BannerService(db)
        now = utcnow()
        await banners.create_banner(title="Second", image="b.jpg", sort_order=2)
        await banners.create_banner(title="First", image="a.jpg", sort_order=1, start_date=now - timedelta(days=1))
        await banners.create_banner(title="Expired", image="c.jpg", end_date=now - timedelta(hours=1))
        await banners.create_banner(title="Scheduled", image="d.jpg", start_date=now + timedelta(days=2))
        await banners.create_banner(title="Off", image="e.jpg", is_active=False)

        assert [b.title for b in await banners.list_banners()] == ["First", "Second"]

    @pytest.mark.asyncio
    async def test_window_with_offset_is_compared_in_utc(self, db):
        banners = BannerService(db)
        pacific = timezone(timedelta(hours=-8))
        await banners.create_banner(
            title="Later", image="l.jpg", start_date=(utcnow() + timedelta(hours=1)).astimezone(pacific)
        )
        ended = await banners.create_banner(
            title="Ended", image="e.jpg", end_date=(utcnow() - timedelta(hours=1)).astimezone(pacific)
        )

        assert await banners.list_banners() == []

        await banners.update_banner(ended.id, end_date=(utcnow() + timedelta(hours=1)).astimezone(pacific))
        assert [b.title for b in await banners.list_banners()] == ["Ended"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db):
        banners = BannerService(db)
        banner = await banners.create_banner(title="Sale", image="s.jpg")

        await banners.update_banner(banner.id, is_active=False)
        assert await banners.list_banners() == []

        await banners.delete_banner(banner.id)
        with pytest.raises(NotFoundError):
            await banners.delete_banner(banner.id)


class TestNotifications:

    @pytest.mark.asyncio
    async def test_unread_filter_and_mark_read(self, db, user):
        notifications = NotificationService(db)
        first = await notifications.create_notification(
            title="Restocked", message="Your size is back", type=NotificationType.RESTOCK, user_id=user.id
        )
        await notifications.create_notification(
            title="Sale", message="20% off", type="discount", user_id=user.id
        )

        await notifications.mark_notification_read(first.id)

        unread = await notifications.list_notifications(user.id, unread_only=True)
        assert [n.title for n in unread] == ["Sale"]
        assert [n.title for n in await notifications.list_notifications(user.id)] == ["Sale", "Restocked"]

    @pytest.mark.asyncio
    async def test_unknown_type_and_missing_notification(self, db):
        notifications = NotificationService(db)
        with pytest.raises(InvalidRequestError):
            await notifications.create_notification(title="x", message="y", type="spam")
        with pytest.raises(NotFoundError):
            await notifications.mark_notification_read(31)


class TestCollections:

    @pytest.mark.asyncio
    async def test_upcoming_filter(self, db):
        collections = CollectionService(db)
        await collections.create_collection(name="Worth the Wait", is_upcoming=True, launch_date=utcnow())
        await collections.create_collection(name="Summer Linen")
        await collections.create_collection(name="Archive", is_active=False)

        assert [c.slug for c in await collections.list_collections(upcoming=True)] == ["worth-the-wait"]
        assert [c.slug for c in await collections.list_collections(upcoming=False)] == ["summer-linen"]
        assert len(await collections.list_collections()) == 2

    @pytest.mark.asyncio
    async def test_get_by_slug_and_duplicate(self, db):
        collections = CollectionService(db)
        created = await collections.create_collection(name="Worth the Wait")

        assert (await collections.get_collection_by_slug("worth-the-wait")).id == created.id
        with pytest.raises(InvalidRequestError):
            await collections.create_collection(name="Worth The Wait")
        with pytest.raises(NotFoundError):
            await collections.get_collection_by_slug("missing")


class TestUsers:

    @pytest.mark.asyncio
    async def test_guest_user_without_email(self, db):
        guest = await UserService(db).create_user(first_name="Visitor")
        assert guest.is_guest is True
        assert guest.email is None

    @pytest.mark.asyncio
    async def test_email_is_unique_and_normalized(self, db, user):
        users = UserService(db)
        assert user.email == "shopper@example.com"
        with pytest.raises(InvalidRequestError):
            await users.create_user(email="Shopper@Example.com")

    @pytest.mark.asyncio
    async def test_update_user(self, db, user):
        updated = await UserService(db).update_user(user.id, phone="+91 90000 00000", preferences={"fit": "slim"})
        assert updated.phone == "+91 90000 00000"
        assert updated.preferences == {"fit": "slim"}
