"""Walk-throughs of FixedVector and FixedMap that print what they do."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from functools import partial
from typing import Optional, Sequence, TextIO

from estl.fixed_map import FixedMap
from estl.vector import FixedVector


def _bool_text(flag: bool) -> str:
    return "true" if flag else "false"


@dataclass
class Sensor:
    """A sensor reading."""

    id: int = 0
    value: float = 0.0

    def __str__(self) -> str:
        return f"Sensor(id={self.id}, value={self.value:g})"


@dataclass
class DeviceInfo:
    """A named device and its temperature."""

    name: str = ""
    temperature: float = 0.0

    def __str__(self) -> str:
        return f"DeviceInfo(name={self.name}, temperature={self.temperature:g}°C)"


def vector_demo(out: Optional[TextIO] = None) -> None:
    """Exercise a FixedVector of sensors, writing a report to ``out``."""
    write = partial(print, file=sys.stdout if out is None else out)

    sensors = FixedVector(10)

    write(f"Vector capacity: {sensors.capacity()}")
    write(f"Vector size: {len(sensors)}")
    write(f"Vector empty: {_bool_text(sensors.empty())}")

    write("\nAdding elements...")
    sensors.append(Sensor(1, 25.5))
    sensors.append(Sensor(2, 30.2))
    sensors.append(Sensor(3, 15.7))
    write(f"Vector size after adding elements: {len(sensors)}")

    write("\nAccessing elements:")
    write(f"First element: {sensors.front()}")
    write(f"Last element: {sensors.back()}")
    write(f"Element at index 1: {sensors[1]}")

    write("\nIterating through all elements:")
    for sensor in sensors:
        write(sensor)

    write("\nUsing explicit iterators:")
    for sensor in sensors:
        write(f"Sensor ID: {sensor.id}, Value: {sensor.value:g}")

    write("\nModifying elements...")
    sensors[0].value = 26.7
    write(f"Modified first element: {sensors[0]}")

    write("\nInserting element at position 1...")
    sensors.insert(1, Sensor(4, 22.3))
    write("Vector after insertion:")
    for sensor in sensors:
        write(sensor)

    write("\nRemoving last element...")
    sensors.pop()
    write("Vector after removal:")
    for sensor in sensors:
        write(sensor)

    write("\nClearing the vector...")
    sensors.clear()
    write(f"Vector size after clearing: {len(sensors)}")
    write(f"Vector empty: {_bool_text(sensors.empty())}")


def map_demo(out: Optional[TextIO] = None) -> None:
    """Exercise a FixedMap of devices, writing a report to ``out``."""
    write = partial(print, file=sys.stdout if out is None else out)

    devices = FixedMap(8, default_factory=DeviceInfo)

    def list_devices() -> None:
        for device_id, info in devices.items():
            write(f"Device ID: {device_id}, Info: {info}")

    write(f"Map capacity: {devices.max_size()}")
    write(f"Map size: {len(devices)}")
    write(f"Map empty: {_bool_text(devices.empty())}")

    write("\nAdding elements...")
    devices.insert(1, DeviceInfo("Temperature Sensor", 25.5))
    devices.insert(2, DeviceInfo("Humidity Sensor", 30.2))
    devices.insert(3, DeviceInfo("Pressure Sensor", 15.7))
    write(f"Map size after adding elements: {len(devices)}")

    write("\nAccessing elements using operator[]:")
    write(f"Device 1: {devices[1]}")
    write(f"Device 2: {devices[2]}")

    write("\nAccessing elements using at():")
    write(f"Device 3: {devices.at(3)}")

    write("\nIterating through all elements:")
    list_devices()

    write("\nUsing explicit iterators:")
    for device_id, info in devices.items():
        write(f"Device ID: {device_id}, Name: {info.name}")

    write("\nModifying elements...")
    devices[1].temperature = 26.7
    write(f"Modified device 1: {devices[1]}")

    key_to_find = 4
    found = "Found!" if key_to_find in devices else "Not found!"
    write(f"\nChecking if key {key_to_find} exists: {found}")

    write("\nAdding a new element using operator[]...")
    devices[4] = DeviceInfo("Motion Sensor", 22.3)
    write("Map after adding new element:")
    list_devices()

    write("\nRemoving element with key 2...")
    devices.erase(2)
    write("Map after removal:")
    list_devices()

    write("\nClearing the map...")
    devices.clear()
    write(f"Map size after clearing: {len(devices)}")
    write(f"Map empty: {_bool_text(devices.empty())}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration (both by default)."""
    parser = argparse.ArgumentParser(
        prog="estl-demo", description="Demonstrate the fixed-capacity containers."
    )
    parser.add_argument(
        "which",
        nargs="?",
        choices=("vector", "map", "all"),
        default="all",
        help="which demonstration to run",
    )
    args = parser.parse_args(argv)
    if args.which in ("vector", "all"):
        vector_demo()
    if args.which == "all":
        print()
    if args.which in ("map", "all"):
        map_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())