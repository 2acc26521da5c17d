import unittest

from frameseq.lib import progressions as prog


class CreateTest(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(prog.create([]), [])

    def test_single(self):
        self.assertEqual(prog.create([3]), [[3]])

    def test_two(self):
        self.assertEqual(prog.create([3, 7]), [[3, 7]])

    def test_progression_at_start(self):
        result = prog.create([3, 5, 7, 10, 15])
        self.assertEqual(result, [[3, 5, 7], [10, 15]])

    def test_progression_at_end(self):
        result = prog.create([3, 5, 8, 10, 12])
        self.assertEqual(result, [[3, 5], [8, 10, 12]])

    def test_trailing_single(self):
        result = prog.create([1, 2, 3, 5, 9])
        self.assertEqual(result, [[1, 2, 3], [5, 9]])

    def test_order(self):
        numbers = [3, 5, 8, 10, 12]
        numbers.reverse()
        self.assertEqual(prog.create(numbers), [[3, 5], [8, 10, 12]])

    def test_from_range(self):
        result = prog.create(range(2, 97, 3))
        self.assertEqual(len(result), 1)
        self.assertEqual(len(result[0]), 32)

    def test_negative(self):
        result = prog.create([-8, -6, -4, 0, 1, 2])
        self.assertEqual(result, [[-8, -6, -4], [0, 1, 2]])

    def test_does_not_modify_input(self):
        numbers = [5, 1, 3]
        prog.create(numbers)
        self.assertEqual(numbers, [5, 1, 3])


class IsProgressionTest(unittest.TestCase):

    def test_short_lists(self):
        self.assertTrue(prog.is_progression([]))
        self.assertTrue(prog.is_progression([4]))
        self.assertTrue(prog.is_progression([4, 40]))

    def test_progression(self):
        self.assertTrue(prog.is_progression([1, 4, 7, 10]))

    def test_not_progression(self):
        self.assertFalse(prog.is_progression([1, 4, 7, 11]))

    def test_break_at_start(self):
        self.assertFalse(prog.is_progression([1, 3, 4, 5]))


class StepTest(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(prog.step([]), 1)

    def test_single(self):
        self.assertEqual(prog.step([9]), 1)

    def test_pair(self):
        self.assertEqual(prog.step([2, 9]), 7)

    def test_progression(self):
        self.assertEqual(prog.step([-6, -4, -2, 0]), 2)

    def test_not_progression(self):
        self.assertIsNone(prog.step([1, 2, 4]))


if __name__ == '__main__':
    unittest.main()
