from txlookup.fetchers.transaction_fetcher import build_query, fetch_transaction
from txlookup.models.lookup import lookup_request
from txlookup.models.transaction import Transaction
from txlookup.transport import Transport


async def get_transaction(transport: Transport, **kwargs) -> Transaction:
    """Keyword form of ``fetch_transaction``: ``hash=``, ``block_hash=``,
    ``block_number=``, ``block_tag=`` and ``index=``."""
    return await fetch_transaction(transport, lookup_request(**kwargs))
