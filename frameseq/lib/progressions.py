"""Arithmetic progressions within sorted lists of frames.

A progression is a run of integers separated by a constant gap. Lists of
0, 1, or 2 elements are always progressions.
"""


def is_progression(arr):
    """Is every consecutive gap in arr the same?"""
    if len(arr) < 3:
        return True
    gap = arr[1] - arr[0]
    return all(arr[i] - arr[i - 1] == gap for i in range(2, len(arr)))


def step(arr):
    """Return the gap of a progression.

    Empty and single element lists have a step of 1 by convention. If arr
    is not a progression, return None.
    """
    if not is_progression(arr):
        return None
    if len(arr) > 1:
        return arr[1] - arr[0]
    return 1


def _should_add(element, progression):
    """Should this element be added to this progression?

    If the progression has 0 or 1 elements, then add it, as this
    starts the progression and fixes the gap. Otherwise check if the
    gap between the element and the last in the progression is the
    same as the gap in the rest of the progression.
    """
    if len(progression) < 2:
        return True
    return progression[1] - progression[0] == element - progression[-1]


def create(iterable):
    """Split a collection of integers into maximal arithmetic progressions.

    The input is sorted first. We walk through it, gathering elements
    while the gap stays the same and starting a new progression when it
    changes. Returns a list of lists in ascending order.
    """
    results = []
    for element in sorted(iterable):
        if not results or not _should_add(element, results[-1]):
            results.append([])
        results[-1].append(element)
    return results

# EXAMPLE RESULTS
#  create([1, 10, 20, 30, 34, 35, 36, 37, 38, 40])
#  [[1, 10], [20, 30], [34, 35, 36, 37, 38], [40]]

#  create([3, 5, 7, 10, 15])
#  [[3, 5, 7], [10, 15]]
