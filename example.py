"""Example usage of the HitBTC SDK."""

import asyncio
from hitbtc_sdk import APIError, ApiAuth, HitBTCClient, LogLevel, OrderBookParams


async def main():
    async with HitBTCClient(log_level=LogLevel.DEBUG) as client:
        # ====================================================================
        # Market data (no keys needed)
        # ====================================================================

        symbols = await client.get_available_currency_symbols()
        print(f"Found {len(symbols)} symbols")

        ticker = await client.get_ticker_info("ETHBTC")
        print(f"ETHBTC last={ticker.last} bid={ticker.bid} ask={ticker.ask}")

        book = await client.get_order_book("ETHBTC", OrderBookParams(limit=5))
        for level in book.asks:
            print(f"  ask {level.price} x {level.size}")

        # ====================================================================
        # Private endpoints
        # ====================================================================

        auth = ApiAuth.from_env()
        if auth is None:
            print("Set HITBTC_PUBLIC_KEY and HITBTC_PRIVATE_KEY to try private endpoints")
            return

        trader = client.upgrade(auth)
        try:
            balances = await trader.get_trading_balances()
            for balance in balances:
                if balance.available != "0":
                    print(f"  {balance.currency}: {balance.available}")
        except APIError as error:
            print(f"Request failed: {error} (payload={error.payload!r})")


if __name__ == "__main__":
    asyncio.run(main())
