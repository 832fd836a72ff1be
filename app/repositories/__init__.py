from . import wallet_repository as wallet_repo
from . import offer_repository as offer_repo
from . import message_repository as message_repo
from . import stats_repository as stats_repo

__all__ = ["wallet_repo", "offer_repo", "message_repo", "stats_repo"]
