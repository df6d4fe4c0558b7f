"""Tests for synthetic record generators."""

import re
from datetime import date
from decimal import Decimal

from carloan_store.generators import CarGenerator, CustomerGenerator
from carloan_store.store import CarLoanRepository
from carloan_store.store.codec import FIELD_SEPARATOR


class TestCustomerGenerator:
    """Tests for CustomerGenerator."""

    def test_generate_customer(self, seed: int) -> None:
        """Test customer generation."""
        customer = CustomerGenerator(seed=seed).generate()

        assert customer.customer_id == 0
        assert customer.created_at is None
        assert " " in customer.full_name
        assert "@" in customer.email
        assert customer.contact_number

    def test_contact_is_philippine_mobile_number(self, seed: int) -> None:
        for customer in CustomerGenerator(seed=seed).generate_batch(10):
            assert re.fullmatch(r"(0|\+63)\d{3}-\d{3}-\d{4}", customer.contact_number)

    def test_address_is_single_line(self, seed: int) -> None:
        for customer in CustomerGenerator(seed=seed).generate_batch(20):
            assert "\n" not in customer.address
            assert FIELD_SEPARATOR not in customer.address

    def test_generate_multiple(self, seed: int) -> None:
        customers = list(CustomerGenerator(seed=seed).generate_batch(5))

        assert len(customers) == 5

    def test_reproducible_with_seed(self, seed: int) -> None:
        """Test that the same seed produces the same customers."""
        first = list(CustomerGenerator(seed=seed).generate_batch(3))
        second = list(CustomerGenerator(seed=seed).generate_batch(3))

        assert first == second


class TestCarGenerator:
    """Tests for CarGenerator."""

    def test_generate_car(self, seed: int) -> None:
        """Test car generation."""
        car = CarGenerator(seed=seed).generate()

        assert car.car_id == 0
        assert car.available is True
        assert car.price > 0
        assert car.price % 1000 == 0
        assert date.today().year - 3 <= car.year <= date.today().year

    def test_catalog_values(self, seed: int) -> None:
        makes = {make for make, *_ in CarGenerator.CATALOG}

        for car in CarGenerator(seed=seed).generate_batch(25):
            assert car.make in makes
            assert car.color in CarGenerator.COLORS
            assert isinstance(car.price, Decimal)

    def test_reproducible_with_seed(self, seed: int) -> None:
        first = list(CarGenerator(seed=seed).generate_batch(5))
        second = list(CarGenerator(seed=seed).generate_batch(5))

        assert first == second


class TestGeneratedRecordsInStore:
    """Tests that generated records persist like any other."""

    def test_insert_and_reload(self, repo: CarLoanRepository, config, seed: int) -> None:
        for car in CarGenerator(seed=seed).generate_batch(4):
            repo.insert_car(car)
        for customer in CustomerGenerator(seed=seed).generate_batch(3):
            repo.insert_customer(customer)

        reopened = CarLoanRepository.open(config)

        assert reopened.get_all_cars() == repo.get_all_cars()
        assert reopened.get_all_customers() == repo.get_all_customers()
        assert all(skipped == [] for skipped in (r.skipped for r in reopened.load_results.values()))
