import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from app.models.offer import Offer
from app.models.wallet import Wallet
from app.schemas.offer import OfferCreateRequest
from app.services import offer_service
from app.utils.constants import utcnow
from app.utils.exceptions import OfferNotFoundError, OfferNotAcceptableError, WalletNotFoundError


def _offer_request(**fields):
    values = {
        "title": "Provide LP tokens",
        "description": "Earn 15% APY on your ETH",
        "offer_type": "tokens",
    }
    values.update(fields)
    return OfferCreateRequest(**values)

def test_create_offer_resolves_target_by_address(db_session, sample_wallet):
    request = _offer_request(
        target_address="0x" + sample_wallet.address[2:].upper(),
        from_anonymous_tag="Yield Farm Beta",
        reward_value=Decimal("1200"),
    )

    offer = offer_service.create_offer(db_session, request)

    assert offer.id is not None
    assert offer.target_wallet_id == sample_wallet.id
    assert offer.from_anonymous_tag == "Yield Farm Beta"
    assert offer.category == "defi"
    assert offer.is_active is True
    assert offer.is_accepted is False
    assert offer.accepted_at is None

def test_create_offer_accepts_target_wallet_id(db_session, sample_wallet):
    offer = offer_service.create_offer(db_session, _offer_request(target_wallet_id=sample_wallet.id))

    assert offer.target_wallet_id == sample_wallet.id

def test_create_offer_with_known_sender(db_session, sample_wallet, make_wallet):
    sender = make_wallet("0x5e4d")

    offer = offer_service.create_offer(
        db_session, _offer_request(target_address=sample_wallet.address, from_address=sender.address)
    )

    assert offer.from_wallet_id == sender.id

def test_create_offer_unknown_target_creates_nothing(db_session):
    with pytest.raises(WalletNotFoundError):
        offer_service.create_offer(db_session, _offer_request(target_address="0x404"))

    assert db_session.query(Offer).count() == 0

def test_create_offer_does_not_match_address_prefix(db_session, sample_wallet):
    """Target lookup is exact, never a substring match."""
    with pytest.raises(WalletNotFoundError):
        offer_service.create_offer(db_session, _offer_request(target_address="0x1234"))

def test_create_offer_unknown_sender(db_session, sample_wallet):
    with pytest.raises(WalletNotFoundError):
        offer_service.create_offer(
            db_session, _offer_request(target_address=sample_wallet.address, from_wallet_id=999)
        )
    assert db_session.query(Offer).count() == 0

def test_create_offer_requires_a_target():
    with pytest.raises(ValueError):
        _offer_request()

def test_accept_offer(db_session, sample_offer):
    offer = offer_service.accept_offer(db_session, sample_offer.id)

    assert offer.is_accepted is True
    assert offer.accepted_at is not None

def test_accept_offer_twice_keeps_first_acceptance_time(db_session, sample_offer):
    first = offer_service.accept_offer(db_session, sample_offer.id)
    first_accepted_at = first.accepted_at

    second = offer_service.accept_offer(db_session, sample_offer.id)

    assert second.is_accepted is True
    assert second.accepted_at == first_accepted_at

def test_accept_missing_offer(db_session):
    with pytest.raises(OfferNotFoundError):
        offer_service.accept_offer(db_session, 31337)

def test_accept_inactive_offer_is_rejected(db_session, sample_wallet, make_offer):
    offer = make_offer(sample_wallet, is_active=False)

    with pytest.raises(OfferNotAcceptableError):
        offer_service.accept_offer(db_session, offer.id)

    db_session.refresh(offer)
    assert offer.is_accepted is False

def test_accept_expired_offer_is_rejected(db_session, sample_wallet, make_offer):
    offer = make_offer(sample_wallet, expiry_date=utcnow() - timedelta(days=1))

    with pytest.raises(OfferNotAcceptableError):
        offer_service.accept_offer(db_session, offer.id)

def test_accept_offer_before_expiry(db_session, sample_wallet, make_offer):
    offer = make_offer(sample_wallet, expiry_date=utcnow() + timedelta(days=7))

    assert offer_service.accept_offer(db_session, offer.id).is_accepted is True

def test_get_offers_for_wallet_newest_first(db_session, sample_wallet, make_offer, make_wallet):
    other = make_wallet("0xbeef")
    older = make_offer(sample_wallet, title="older", created_at=datetime(2026, 1, 1))
    newer = make_offer(sample_wallet, title="newer", created_at=datetime(2026, 2, 1))
    make_offer(other, title="someone else")

    offers = offer_service.get_offers_for_wallet(db_session, sample_wallet.id)

    assert [offer.id for offer in offers] == [newer.id, older.id]

def test_get_offers_for_unknown_wallet_is_empty(db_session):
    assert offer_service.get_offers_for_wallet(db_session, 777) == []

def test_get_top_offers_only_active_and_capped(db_session, sample_wallet, make_offer):
    for index in range(12):
        make_offer(sample_wallet, title=f"offer {index}")
    inactive = make_offer(sample_wallet, title="withdrawn", is_active=False)

    offers = offer_service.get_top_offers(db_session)

    assert len(offers) == 10
    assert inactive.id not in [offer.id for offer in offers]
    assert all(offer.is_active for offer in offers)

def test_get_recent_activity(db_session, sample_offer):
    activity = offer_service.get_recent_activity(db_session)

    assert len(activity) == 1
    assert activity[0]["id"] == sample_offer.id
    assert activity[0]["type"] == "offer"
    assert activity[0]["description"] == "New offer: Stake 10 ETH for 30 days"
    assert activity[0]["timestamp"].tzinfo == timezone.utc
    assert activity[0]["timestamp"].replace(tzinfo=None) == sample_offer.created_at
    assert activity[0]["wallet_address"] is None

def test_deleting_wallet_cascades_to_offers(db_session, sample_offer):
    wallet = db_session.query(Wallet).filter(Wallet.id == sample_offer.target_wallet_id).first()

    db_session.delete(wallet)
    db_session.commit()

    assert db_session.query(Offer).count() == 0
