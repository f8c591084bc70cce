"""Tests for VehicleRepository.

The repository is exercised directly against the seeded in-memory store
from ``conftest.seed``.
"""

import threading

import pytest

from vehicles_api.app.core.exceptions import DuplicateIDError, NotFoundError
from vehicles_api.app.repositories.vehicle_repository import VehicleRepository
from vehicles_api.app.schemas.vehicle import VehicleCreate

from .conftest import vehicle_payload


class TestFindAll:
    def test_returns_every_vehicle_ordered_by_id(self, repository):
        result = repository.find_all()

        assert list(result) == [1, 2, 3, 4]
        assert result[2].model == "Camry"

    def test_empty_store(self):
        assert VehicleRepository().find_all() == {}

    def test_returns_copies(self, repository):
        result = repository.find_all()
        result[1].max_speed = 1.0
        del result[2]

        fresh = repository.find_all()
        assert fresh[1].max_speed == 180.0
        assert 2 in fresh

    def test_seed_mapping_is_not_shared(self, seed):
        repo = VehicleRepository(seed)
        seed.pop(1)

        assert 1 in repo.find_all()


class TestCreate:
    def test_created_vehicle_is_listed(self, repository):
        created = repository.create(VehicleCreate(**vehicle_payload(id=10, brand="Kia")))

        assert created.id == 10
        assert repository.find_all()[10].brand == "Kia"

    def test_duplicate_id_fails_and_leaves_store_unchanged(self, repository):
        before = repository.find_all()

        with pytest.raises(DuplicateIDError) as exc_info:
            repository.create(VehicleCreate(**vehicle_payload(id=1, brand="Kia")))

        assert exc_info.value.vehicle_id == 1
        assert "already exists" in str(exc_info.value)
        assert repository.find_all() == before

    def test_missing_id_gets_next_free_id(self, repository):
        created = repository.create(VehicleCreate(**vehicle_payload(id=None)))

        assert created.id == 5

    def test_missing_id_in_empty_store_starts_at_one(self):
        created = VehicleRepository().create(VehicleCreate(**vehicle_payload(id=None)))

        assert created.id == 1


class TestCreateBatch:
    def test_inserts_all(self, repository):
        created = repository.create_batch(
            [VehicleCreate(**vehicle_payload(id=7)), VehicleCreate(**vehicle_payload(id=6))]
        )

        assert list(created) == [6, 7]
        assert len(repository) == 6

    def test_collision_with_store_inserts_nothing(self, repository):
        with pytest.raises(DuplicateIDError):
            repository.create_batch(
                [VehicleCreate(**vehicle_payload(id=8)), VehicleCreate(**vehicle_payload(id=3))]
            )

        assert 8 not in repository.find_all()
        assert len(repository) == 4

    def test_collision_within_batch_inserts_nothing(self, repository):
        with pytest.raises(DuplicateIDError):
            repository.create_batch(
                [VehicleCreate(**vehicle_payload(id=9)), VehicleCreate(**vehicle_payload(id=9))]
            )

        assert len(repository) == 4

    def test_missing_ids_skip_explicit_ones(self, repository):
        created = repository.create_batch(
            [
                VehicleCreate(**vehicle_payload(id=None)),
                VehicleCreate(**vehicle_payload(id=20)),
                VehicleCreate(**vehicle_payload(id=None)),
            ]
        )

        assert sorted(created) == [20, 21, 22]

    def test_empty_batch(self, repository):
        assert repository.create_batch([]) == {}
        assert len(repository) == 4


class TestQueries:
    def test_find_by_color_year(self, repository):
        result = repository.find_by_color_year("red", 2020)

        assert list(result) == [1, 3]

    def test_find_by_color_year_no_match(self, repository):
        with pytest.raises(NotFoundError):
            repository.find_by_color_year("red", 1999)

    def test_find_by_brand_range_is_inclusive(self, repository):
        assert list(repository.find_by_brand_range("Toyota", 2020, 2022)) == [1, 2]
        assert list(repository.find_by_brand_range("Toyota", 2021, 2022)) == [2]

    def test_find_by_brand_range_no_match(self, repository):
        with pytest.raises(NotFoundError, match="Toyota"):
            repository.find_by_brand_range("Toyota", 2023, 2030)

    def test_find_by_fuel_type(self, repository):
        assert list(repository.find_by_fuel_type("gasoline")) == [1, 4]

    def test_find_by_fuel_type_no_match(self, repository):
        with pytest.raises(NotFoundError):
            repository.find_by_fuel_type("electric")

    def test_find_by_dimensions_bounds_inclusive(self, repository):
        result = repository.find_by_dimensions(1.0, 2.0, 1.0, 2.0)

        assert list(result) == [4]
        for vehicle in result.values():
            assert 1.0 <= vehicle.length <= 2.0
            assert 1.0 <= vehicle.width <= 2.0

    def test_find_by_dimensions_exact_edges(self, repository):
        assert list(repository.find_by_dimensions(4.0, 4.6, 1.73, 1.78)) == [1, 3]

    def test_find_by_dimensions_no_match(self, repository):
        with pytest.raises(NotFoundError):
            repository.find_by_dimensions(10.0, 20.0, 1.0, 2.0)


class TestAverageSpeed:
    def test_mean_of_brand(self, repository):
        assert repository.average_speed("Toyota") == pytest.approx(190.0)

    def test_single_vehicle(self, repository):
        assert repository.average_speed("Ford") == pytest.approx(170.0)

    def test_unknown_brand(self, repository):
        with pytest.raises(NotFoundError):
            repository.average_speed("Tesla")


class TestUpdates:
    def test_update_speed_changes_only_speed(self, repository):
        before = repository.find_all()[2]

        updated = repository.update_speed(2, 210.5)

        assert updated.max_speed == 210.5
        assert repository.find_all()[2] == before.model_copy(update={"max_speed": 210.5})

    def test_update_speed_missing_id(self, repository):
        before = repository.find_all()

        with pytest.raises(NotFoundError):
            repository.update_speed(99, 100.0)

        assert repository.find_all() == before

    def test_update_fuel_type(self, repository):
        updated = repository.update_fuel_type(3, "electric")

        assert updated.fuel_type == "electric"
        assert list(repository.find_by_fuel_type("electric")) == [3]

    def test_update_fuel_type_missing_id(self, repository):
        with pytest.raises(NotFoundError):
            repository.update_fuel_type(99, "electric")


class TestDelete:
    def test_delete_then_repeat(self, repository):
        repository.delete(1)

        assert 1 not in repository.find_all()
        with pytest.raises(NotFoundError):
            repository.delete(1)

    def test_delete_missing(self, repository):
        with pytest.raises(NotFoundError):
            repository.delete(42)
        assert len(repository) == 4


def test_concurrent_creates_keep_every_vehicle():
    repo = VehicleRepository()

    def worker(offset: int) -> None:
        for i in range(50):
            repo.create(VehicleCreate(**vehicle_payload(id=offset * 1000 + i)))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(repo) == 400
