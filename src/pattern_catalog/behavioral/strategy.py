"""Strategy: the fare rule is swapped at runtime without touching Customer."""

from __future__ import annotations

from typing import Protocol

from ..registry import scenario


class BookingStrategy(Protocol):
    fare: float


class CarBookingStrategy:
    fare = 12.5

    def __str__(self) -> str:
        return "CarBookingStrategy"


class TrainBookingStrategy:
    fare = 8.5

    def __str__(self) -> str:
        return "TrainBookingStrategy"


class Customer:
    def __init__(self, booking_strategy: BookingStrategy) -> None:
        self.booking_strategy = booking_strategy

    def calculate_fare(self, num_of_passengers: int) -> float:
        fare = num_of_passengers * self.booking_strategy.fare
        print(f"Calculating fares using {self.booking_strategy}")
        return fare


@scenario("strategy", category="behavioral", title="Strategy")
def main() -> None:
    customer = Customer(CarBookingStrategy())
    print(customer.calculate_fare(5))

    customer.booking_strategy = TrainBookingStrategy()
    print(customer.calculate_fare(5))


if __name__ == "__main__":
    main()

### OUTPUT ###
# Calculating fares using CarBookingStrategy
# 62.5
# Calculating fares using TrainBookingStrategy
# 42.5
