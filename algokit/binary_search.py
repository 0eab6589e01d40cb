"""Binary search over sorted arrays and over monotone answer ranges."""

from bisect import bisect_left
from collections.abc import Callable, Sequence


def _first_true(low: int, high: int, predicate: Callable[[int], bool]) -> int:
    """Return the smallest value in ``[low, high]`` for which ``predicate`` holds.

    ``predicate`` must be monotone (false, then true). Returns ``high + 1``
    when it holds nowhere in the range.
    """
    candidates = range(low, high + 1)
    return low + bisect_left(candidates, True, key=predicate)


def _pieces(values: Sequence[int], capacity: int) -> int:
    """Count the consecutive pieces needed so no piece sums above ``capacity``."""
    pieces, running = 1, 0
    for value in values:
        if running + value <= capacity:
            running += value
        else:
            pieces += 1
            running = value
    return pieces


def _ceil_div_total(values: Sequence[int], divisor: int) -> int:
    return sum(-(-value // divisor) for value in values)


def find_min(nums: Sequence[int]) -> int:
    """Return the minimum of a rotated ascending array of distinct values."""
    if not nums:
        raise ValueError("the array must not be empty")
    low, high = 0, len(nums) - 1
    smallest = nums[0]
    while low <= high:
        mid = (low + high) // 2
        smallest = min(smallest, nums[mid])
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return smallest


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Adjacent elements are expected to differ; the ends count as bordered
    by minus infinity.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("the array must not be empty")
    if n == 1:
        return 0
    if n == 2:
        return 0 if nums[0] >= nums[1] else 1
    if nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        elif nums[mid] < nums[mid - 1]:
            high = mid - 1
        else:
            raise ValueError("adjacent elements must differ")
    raise ValueError("no peak found; adjacent elements must differ")


def split_array(nums: Sequence[int], k: int) -> int:
    """Return the smallest possible largest sum when ``nums`` is split into ``k`` parts."""
    if not nums:
        raise ValueError("the array must not be empty")
    if k < 1:
        raise ValueError("the number of parts must be at least 1")
    return _first_true(max(nums), sum(nums), lambda cap: _pieces(nums, cap) <= k)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted array of pairs."""
    n = len(nums)
    if n == 0:
        raise ValueError("the array must not be empty")
    if n == 1:
        return nums[0]
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        matches_left = mid > 0 and nums[mid] == nums[mid - 1]
        matches_right = mid < n - 1 and nums[mid] == nums[mid + 1]
        if not matches_left and not matches_right:
            return nums[mid]
        even = mid % 2 == 0
        if (matches_left and even) or (matches_right and not even):
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError("no single element in a well-formed array of pairs")


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating speed that finishes all piles within ``h`` hours."""
    if not piles:
        raise ValueError("there must be at least one pile")
    if h < len(piles):
        raise ValueError("fewer hours than piles: no speed suffices")
    return _first_true(1, max(piles), lambda speed: _ceil_div_total(piles, speed) <= h)


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that ships all packages in order within ``days``."""
    if not weights:
        raise ValueError("there must be at least one package")
    if days < 1:
        raise ValueError("days must be at least 1")
    return _first_true(
        max(weights), sum(weights), lambda cap: _pieces(weights, cap) <= days
    )


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the smallest divisor keeping the sum of rounded-up quotients within ``threshold``."""
    if not nums:
        raise ValueError("the array must not be empty")
    if threshold < len(nums):
        raise ValueError("threshold below the array length: no divisor suffices")
    return _first_true(
        1, max(nums), lambda divisor: _ceil_div_total(nums, divisor) <= threshold
    )


def _bouquets(bloom_day: Sequence[int], k: int, day: int) -> int:
    made = run = 0
    for bloom in bloom_day:
        if bloom <= day:
            run += 1
            if run == k:
                made += 1
                run = 0
        else:
            run = 0
    return made


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the first day ``m`` bouquets of ``k`` adjacent flowers can be made, or -1."""
    if not bloom_day:
        return -1
    low, high = min(bloom_day), max(bloom_day)
    day = _first_true(low, high, lambda d: _bouquets(bloom_day, k, d) >= m)
    return day if day <= high else -1