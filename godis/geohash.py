"""Geohash encoding of coordinates into 64-bit codes, distances and neighbouring blocks."""

from __future__ import annotations

import base64
import math

_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
_TO_GEOHASH_ALPHABET = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", _ALPHABET)

DEFAULT_BIT_SIZE = 64  # 32 bits for latitude, 32 bits for longitude
_MASK64 = (1 << 64) - 1

_DEG_TO_RAD = math.pi / 180.0
EARTH_RADIUS = 6372797.560856
MERCATOR_MAX = 20037726.37  # pi * earth radius


def _encode(latitude: float, longitude: float, bit_size: int) -> tuple[bytes, list[list[float]]]:
    """Interleave longitude and latitude bits; return the hash bytes and the final box."""
    box = [[-180.0, 180.0], [-90.0, 90.0]]  # longitude, latitude
    position = (longitude, latitude)
    code = bytearray((bit_size + 7) // 8)
    precision = 0
    while precision < bit_size:
        for direction, value in enumerate(position):
            low, high = box[direction]
            mid = (low + high) / 2
            if value < mid:
                box[direction][1] = mid
            else:
                box[direction][0] = mid
                code[precision >> 3] |= 1 << (7 - (precision & 7))
            precision += 1
            if precision == bit_size:
                break
    return bytes(code), box


def _decode(code: bytes) -> list[list[float]]:
    box = [[-180.0, 180.0], [-90.0, 90.0]]
    direction = 0
    for byte in code:
        for shift in range(7, -1, -1):
            low, high = box[direction]
            mid = (low + high) / 2
            if (byte >> shift) & 1:
                box[direction][0] = mid
            else:
                box[direction][1] = mid
            direction ^= 1
    return box


def to_int(buf: bytes) -> int:
    """Read up to the first 8 bytes as a big-endian integer, padding short input with zeros."""
    return int.from_bytes(bytes(buf[:8]).ljust(8, b"\x00"), "big")


def from_int(code: int) -> bytes:
    """The 8 big-endian bytes of a 64-bit code."""
    return (code & _MASK64).to_bytes(8, "big")


def to_string(buf: bytes) -> str:
    """Base32 text of a geohash, in the geohash alphabet and without padding."""
    return base64.b32encode(bytes(buf)).decode("ascii").rstrip("=").translate(_TO_GEOHASH_ALPHABET)


def encode(latitude: float, longitude: float) -> int:
    """The 64-bit geohash code of a coordinate."""
    code, _ = _encode(latitude, longitude, DEFAULT_BIT_SIZE)
    return to_int(code)


def decode(code: int) -> tuple[float, float]:
    """The ``(latitude, longitude)`` at the centre of the block of a 64-bit code."""
    box = _decode(from_int(code))
    longitude = (box[0][0] + box[0][1]) / 2
    latitude = (box[1][0] + box[1][1]) / 2
    return latitude, longitude


def distance(latitude1: float, longitude1: float, latitude2: float, longitude2: float) -> float:
    """Great-circle distance between two coordinates in metres."""
    rad_lat1 = latitude1 * _DEG_TO_RAD
    rad_lat2 = latitude2 * _DEG_TO_RAD
    a = rad_lat1 - rad_lat2
    b = longitude1 * _DEG_TO_RAD - longitude2 * _DEG_TO_RAD
    return 2 * EARTH_RADIUS * math.asin(
        math.sqrt(
            math.sin(a / 2) ** 2 + math.cos(rad_lat1) * math.cos(rad_lat2) * math.sin(b / 2) ** 2
        )
    )


def _estimate_precision_by_radius(radius_meters: float, latitude: float) -> int:
    if radius_meters < 0:
        raise ValueError("radius must not be negative")
    if radius_meters == 0:
        return DEFAULT_BIT_SIZE - 1
    precision = 1
    while radius_meters < MERCATOR_MAX:
        radius_meters *= 2
        precision += 1
    # unsigned arithmetic: an underflow wraps and is then clamped to the maximum
    precision = (precision - 2) & _MASK64
    if latitude > 66 or latitude < -66:
        precision = (precision - 1) & _MASK64
        if latitude > 80 or latitude < -80:
            precision = (precision - 1) & _MASK64
    precision = min(max(precision, 1), 32)
    return precision * 2 - 1


def to_range(scope: bytes, precision: int) -> tuple[int, int]:
    """The ``[lower, upper)`` code range covered by a geohash prefix of ``precision`` bits."""
    lower = to_int(scope)
    upper = (lower + (1 << (64 - precision))) & _MASK64
    return lower, upper


def _valid_lat(lat: float) -> float:
    return min(max(lat, -90.0), 90.0)


def _valid_lng(lng: float) -> float:
    if lng > 180:
        return lng - 360
    if lng < -180:
        return lng + 360
    return lng


def get_neighbours(latitude: float, longitude: float, radius_meters: float) -> list[tuple[int, int]]:
    """Code ranges of the nine blocks around a coordinate that cover ``radius_meters``.

    The order is: upper left, upper, upper right, left, centre, right,
    lower left, lower, lower right.
    """
    precision = _estimate_precision_by_radius(radius_meters, latitude)
    center, box = _encode(latitude, longitude, precision)
    width = box[0][1] - box[0][0]
    height = box[1][1] - box[1][0]
    center_lng = (box[0][1] + box[0][0]) / 2
    center_lat = (box[1][1] + box[1][0]) / 2
    max_lat = _valid_lat(center_lat + height)
    min_lat = _valid_lat(center_lat - height)
    max_lng = _valid_lng(center_lng + width)
    min_lng = _valid_lng(center_lng - width)

    def block(lat: float, lng: float) -> tuple[int, int]:
        return to_range(_encode(lat, lng, precision)[0], precision)

    return [
        block(max_lat, min_lng),
        block(max_lat, center_lng),
        block(max_lat, max_lng),
        block(center_lat, min_lng),
        to_range(center, precision),
        block(center_lat, max_lng),
        block(min_lat, min_lng),
        block(min_lat, center_lng),
        block(min_lat, max_lng),
    ]