"""
Unit tests for display transforms

Tests transforms.py angle mapping, range scaling and alpha fade
"""

import unittest
import numpy as np
from radarscope.visualization.transforms import (
    arc_points,
    blip_alphas,
    blip_positions,
    distance_to_radius,
    polar_to_screen,
)

PIVOT = (500.0, 540.0)


class TestPolarToScreen(unittest.TestCase):
    """Test sweep angle to screen mapping"""

    def test_zero_degrees_is_right(self):
        """Test 0 degrees points to the right end of the baseline"""
        np.testing.assert_array_almost_equal(polar_to_screen(0.0, 100.0, PIVOT), [600.0, 540.0])

    def test_ninety_degrees_is_up(self):
        """Test 90 degrees points straight up (screen y decreases)"""
        np.testing.assert_array_almost_equal(polar_to_screen(90.0, 100.0, PIVOT), [500.0, 440.0])

    def test_one_eighty_degrees_is_left(self):
        """Test 180 degrees points to the left end of the baseline"""
        np.testing.assert_array_almost_equal(polar_to_screen(180.0, 100.0, PIVOT), [400.0, 540.0])

    def test_vectorized(self):
        """Test arrays of angles map element-wise"""
        points = polar_to_screen(np.array([0.0, 90.0, 180.0]), 100.0, PIVOT)
        self.assertEqual(points.shape, (3, 2))
        np.testing.assert_array_almost_equal(points[1], [500.0, 440.0])

    def test_arc_points(self):
        """Test range arc end points and radius"""
        points = arc_points(200.0, PIVOT, segments=12)
        self.assertEqual(points.shape, (13, 2))
        np.testing.assert_array_almost_equal(points[0], [700.0, 540.0])
        np.testing.assert_array_almost_equal(points[-1], [300.0, 540.0])
        radii = np.hypot(points[:, 0] - PIVOT[0], points[:, 1] - PIVOT[1])
        np.testing.assert_array_almost_equal(radii, np.full(13, 200.0))


class TestRangeScaling(unittest.TestCase):
    """Test distance to radius scaling"""

    def test_linear_within_range(self):
        """Test distances scale linearly up to max range"""
        radii = distance_to_radius([0.0, 150.0, 300.0], 300, 460.0)
        np.testing.assert_array_almost_equal(radii, [0.0, 230.0, 460.0])

    def test_saturates_beyond_range(self):
        """Test distances past max range sit on the outer ring"""
        radii = distance_to_radius([301.0, 500.0], 300, 460.0)
        np.testing.assert_array_almost_equal(radii, [460.0, 460.0])

    def test_blip_positions_shape(self):
        """Test batch blip mapping"""
        positions = blip_positions([0.0, 180.0], [300.0, 600.0], 300, 100.0, PIVOT)
        self.assertEqual(positions.shape, (2, 2))
        np.testing.assert_array_almost_equal(positions, [[600.0, 540.0], [400.0, 540.0]])

    def test_blip_positions_single(self):
        """Test a single scalar blip still gives an (N, 2) array"""
        self.assertEqual(blip_positions(45.0, 100.0, 300, 100.0, PIVOT).shape, (1, 2))


class TestAlphaFade(unittest.TestCase):
    """Test blip fade"""

    def test_new_blip_fully_opaque(self):
        """Test age 0 gives full alpha"""
        self.assertEqual(blip_alphas([0.0], 2.0)[0], 255)

    def test_fades_to_floor(self):
        """Test alpha reaches the floor at the lifetime"""
        self.assertEqual(blip_alphas([2.0], 2.0)[0], 50)
        self.assertEqual(blip_alphas([5.0], 2.0)[0], 50)

    def test_monotonic(self):
        """Test alpha never increases with age"""
        alphas = blip_alphas(np.linspace(0.0, 2.0, 50), 2.0)
        self.assertTrue(np.all(np.diff(alphas) <= 0))
        self.assertTrue(np.all((alphas >= 50) & (alphas <= 255)))


if __name__ == '__main__':
    unittest.main()
