"""Array algorithms: pair and triple sums, water trapping, subarrays and more."""

import heapq
from collections import deque
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two numbers adding up to ``target``, or ``[]``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triple summing to zero, in sorted order."""
    ordered = sorted(nums)
    n = len(ordered)
    found: set[tuple[int, int, int]] = set()
    for i in range(n - 2):
        j, k = i + 1, n - 1
        while j < k:
            total = ordered[i] + ordered[j] + ordered[k]
            if total == 0:
                found.add((ordered[i], ordered[j], ordered[k]))
                j += 1
                k -= 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return [list(triple) for triple in sorted(found)]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers closest to ``target``.

    On a tie the first sum met in the two-pointer scan is kept.
    """
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    ordered = sorted(nums)
    n = len(ordered)
    best_sum = 0
    best_diff = None
    for i in range(n - 2):
        j, k = i + 1, n - 1
        while j < k:
            total = ordered[i] + ordered[j] + ordered[k]
            if total == target:
                return target
            diff = abs(target - total)
            if best_diff is None or diff < best_diff:
                best_diff = diff
                best_sum = total
            if total < target:
                j += 1
            else:
                k -= 1
    return best_sum


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    if not height:
        return 0
    i, j = 0, len(height) - 1
    left_max, right_max = height[i], height[j]
    water = 0
    while i < j:
        if left_max <= right_max:
            water += left_max - height[i]
            i += 1
            left_max = max(left_max, height[i])
        else:
            water += right_max - height[j]
            j -= 1
            right_max = max(right_max, height[j])
    return water


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not nums:
        raise ValueError("the array must not be empty")
    best = current = nums[0]
    for value in nums[1:]:
        current = value if current < 0 else current + value
        best = max(best, current)
    return best


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """Return the k-th positive integer missing from the sorted array."""
    for value in arr:
        if value <= k:
            k += 1
    return k


def row_and_maximum_ones(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return ``(row index, count)`` of the first row with the most ones."""
    if not mat:
        raise ValueError("the matrix must not be empty")
    best_row, best_count = 0, 0
    for index, row in enumerate(mat):
        count = sum(1 for cell in row if cell == 1)
        if count > best_count:
            best_row, best_count = index, count
    return best_row, best_count


def find_peaks(mountain: Sequence[int]) -> list[int]:
    """Return the indices of elements strictly greater than both neighbours."""
    return [
        index
        for index, (left, middle, right) in enumerate(
            zip(mountain, mountain[1:], mountain[2:]), start=1
        )
        if left < middle > right
    ]


def max_removal(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Return how many range queries can be dropped while still zeroing ``nums``.

    Each query ``[l, r]`` may decrement every element in that range by one.
    Returns -1 when even all the queries cannot bring ``nums`` to zero.
    """
    pending = deque(sorted(queries))
    available: list[int] = []  # max-heap of right ends, stored negated
    assigned: list[int] = []  # min-heap of right ends in use
    used = 0
    for time, need in enumerate(nums):
        while assigned and assigned[0] < time:
            heapq.heappop(assigned)
        while pending and pending[0][0] <= time:
            heapq.heappush(available, -pending.popleft()[1])
        while len(assigned) < need and available and -available[0] >= time:
            heapq.heappush(assigned, -heapq.heappop(available))
            used += 1
        if len(assigned) < need:
            return -1
    return len(queries) - used