"""
Load test for the relay endpoints.

Run: locust -f locustfile.py --host http://127.0.0.1:3000
Every request hits a live upstream (RPC node or Solscan); keep user counts low
against public endpoints.
"""

import random

from locust import HttpUser, between, task

ACCOUNTS = [
    "9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka",
    "7F1WzVNQ1Qpurqxxdyv3UrFQR3uoNepULVW9A4bAJ5nZ",
    "So11111111111111111111111111111111111111112",
    "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
]


class RelayUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def solana_status(self):
        self.client.get("/solana/status")

    @task(2)
    def pool_info(self):
        self.client.get(f"/pool/{random.choice(ACCOUNTS)}", name="/pool/[pool_id]")

    @task(2)
    def token_pair(self):
        token_a, token_b = random.sample(ACCOUNTS, 2)
        self.client.get(f"/token-pair/{token_a}/{token_b}", name="/token-pair/[token_a]/[token_b]")

    @task(1)
    def transactions(self):
        self.client.get(f"/transactions/{random.choice(ACCOUNTS)}", name="/transactions/[token]")
