"""Stockroom load test scenarios.

StockJourney walks one product through create -> buy -> sell -> list and
checks the balances the API reports. ContendedSellUser points many users
at the same product to exercise the per-product lock: the total sold must
never exceed what was bought.
"""

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import buy_amount, product_data, sell_amount
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ProductState

# Shared by every ContendedSellUser in this process
CONTENDED_PRODUCT = ProductState()


class StockJourney(SequentialTaskSet):
    """Create Product -> Buy -> Sell -> Sell -> List."""

    def on_start(self):
        self.state = ProductState()

    @task
    def create_product(self):
        with self.client.post(
            "/products",
            json=product_data(),
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["id"]
            else:
                resp.failure(f"Create product failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def buy(self):
        amount = buy_amount()
        with self.client.post(
            f"/products/{self.state.product_id}/buy",
            json={"amount": amount},
            catch_response=True,
            name="POST /products/{id}/buy",
        ) as resp:
            if resp.status_code == 200:
                self.state.expected_on_hand += amount
                if resp.json()["balance"] != self.state.expected_on_hand:
                    resp.failure(f"Balance drift after buy: {resp.json()['balance']} != {self.state.expected_on_hand}")
            else:
                resp.failure(f"Buy failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task(2)
    def sell(self):
        amount = sell_amount(self.state.expected_on_hand)
        with self.client.post(
            f"/products/{self.state.product_id}/sell",
            json={"amount": amount},
            catch_response=True,
            name="POST /products/{id}/sell",
        ) as resp:
            if resp.status_code == 200:
                self.state.expected_on_hand -= amount
                resp.success()
            elif resp.status_code == 400 and amount > self.state.expected_on_hand:
                # Rejected oversell is the expected outcome
                self.state.rejected_sales += 1
                resp.success()
            else:
                resp.failure(f"Sell failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def list_products(self):
        with self.client.get("/products", catch_response=True, name="GET /products") as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class StockUser(HttpUser):
    tasks = [StockJourney]
    wait_time = between(0.5, 2)


class ContendedSellUser(HttpUser):
    """Many users selling single units of one shared product."""

    wait_time = constant_pacing(0.2)

    def on_start(self):
        if CONTENDED_PRODUCT.product_id is None:
            resp = self.client.post("/products", json=product_data(), name="[CONTENDED] POST /products")
            CONTENDED_PRODUCT.product_id = resp.json()["id"]
            self.client.post(
                f"/products/{CONTENDED_PRODUCT.product_id}/buy",
                json={"amount": 500},
                name="[CONTENDED] POST /products/{id}/buy",
            )
            CONTENDED_PRODUCT.expected_on_hand = 500

    @task
    def sell_one(self):
        with self.client.post(
            f"/products/{CONTENDED_PRODUCT.product_id}/sell",
            json={"amount": 1},
            catch_response=True,
            name="[CONTENDED] POST /products/{id}/sell",
        ) as resp:
            if resp.status_code == 200:
                if resp.json()["balance"] < 0:
                    resp.failure("Oversold: balance went negative")
            elif resp.status_code == 400:
                CONTENDED_PRODUCT.rejected_sales += 1
                resp.success()
            else:
                resp.failure(f"Sell failed: {resp.status_code}: {extract_error_detail(resp)}")
