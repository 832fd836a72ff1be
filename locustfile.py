"""
Load testing script for the Liquidity Marketplace API using Locust.

Run with:
    locust -f locustfile.py --host=http://localhost:8000 --headless -u 100 -r 10 -t 60s

Parameters:
    -u: Number of concurrent users
    -r: Spawn rate (users per second)
    -t: Test duration
"""

from locust import HttpUser, task, between
import random


class MarketplaceUser(HttpUser):
    """
    Simulates a wallet holder browsing the marketplace.

    Task weights determine request distribution:
    - 50% wallet listing with random filters (most frequent)
    - 15% reconnects with fresh balances
    - 15% stats / activity polling
    - 10% top offers
    - 10% offers sent to the user's own wallet
    """

    # Wait 1-3 seconds between requests per user
    wait_time = between(1, 3)

    def on_start(self):
        """Connect a wallet with a random address on startup"""
        self.address = "0x" + "".join(random.choice("0123456789abcdef") for _ in range(40))
        self.wallet_id = None

        response = self.client.post(
            "/api/wallets/connect",
            json=self._balances(),
            name="/api/wallets/connect (setup)"
        )
        if response.status_code == 200:
            self.wallet_id = response.json()["id"]

    def _balances(self):
        return {
            "address": self.address,
            "ethBalance": f"{random.uniform(0, 50):.4f}",
            "stethBalance": f"{random.uniform(0, 20):.4f}",
            "rethBalance": f"{random.uniform(0, 10):.4f}",
            "cbethBalance": f"{random.uniform(0, 10):.4f}",
            "lrtBalances": {"ezeth": f"{random.uniform(0, 5):.4f}"},
        }

    @task(50)
    def list_wallets(self):
        """Browse the wallet table (50% of requests)"""
        self.client.get(
            "/api/wallets",
            params={
                "page": random.randint(1, 5),
                "limit": 10,
                "minEth": random.choice([0, 1, 10]),
                "sortBy": random.choice(["totalValueUsd", "lastActive"]),
                "sortOrder": random.choice(["asc", "desc"]),
            },
            name="/api/wallets"
        )

    @task(15)
    def reconnect_wallet(self):
        """Refresh balances (15% of requests)"""
        self.client.post("/api/wallets/connect", json=self._balances(), name="/api/wallets/connect")

    @task(10)
    def stats(self):
        self.client.get("/api/stats", name="/api/stats")

    @task(5)
    def activity(self):
        self.client.get("/api/activity", name="/api/activity")

    @task(10)
    def top_offers(self):
        self.client.get("/api/offers/top", name="/api/offers/top")

    @task(10)
    def my_offers(self):
        """List offers received by this user's wallet (10% of requests)"""
        if self.wallet_id is None:
            return
        self.client.get(f"/api/wallets/{self.wallet_id}/offers", name="/api/wallets/:id/offers")

    @task(5)
    def health_check(self):
        """Hit health endpoint (5% of requests)"""
        self.client.get("/health", name="/health")
