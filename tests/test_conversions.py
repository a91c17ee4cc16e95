import numpy as np
import pytest

from mrclam_toolkit.core_logic.structures import (
    BarcodeEntry,
    Groundtruth,
    Landmark,
    Measurement,
    Odometry
)
from mrclam_toolkit.utils.conversions import (
    barcode_lookup,
    groundtruth_to_array,
    landmarks_to_array,
    measurements_to_array,
    normalize_angle,
    odometry_to_array
)


def test_groundtruth_and_odometry_arrays():
    gt = groundtruth_to_array([Groundtruth(1.0, 2.0, 3.0, 0.5)])
    odo = odometry_to_array([Odometry(1.0, 0.2, -0.1), Odometry(2.0, 0.3, 0.0)])

    np.testing.assert_allclose(gt, [[1.0, 2.0, 3.0, 0.5]])
    assert odo.shape == (2, 3)


def test_empty_inputs_keep_shape():
    assert groundtruth_to_array([]).shape == (0, 4)
    assert odometry_to_array([]).shape == (0, 3)
    assert measurements_to_array([]).shape == (0, 4)
    assert landmarks_to_array([]).shape == (0, 6)


def test_measurements_flattened_with_bucket_time():
    records = [
        Measurement(10.0, (36, 18), (3.2, 4.1), (0.1, -0.2)),
        Measurement(10.2, (72,), (1.5,), (0.7,))
    ]

    np.testing.assert_allclose(measurements_to_array(records), [
        [10.0, 36, 3.2, 0.1],
        [10.0, 18, 4.1, -0.2],
        [10.2, 72, 1.5, 0.7]
    ])


def test_landmarks_array():
    array = landmarks_to_array([Landmark(6, 36, 1.5, -2.0, 0.01, 0.02)])

    np.testing.assert_allclose(array, [[6, 36, 1.5, -2.0, 0.01, 0.02]])


def test_barcode_lookup_first_occurrence_wins():
    lookup = barcode_lookup([BarcodeEntry(0, 72), BarcodeEntry(1, 90), BarcodeEntry(2, 72)])

    assert lookup == {72: 1, 90: 2}


def test_normalize_angle():
    assert normalize_angle(3 * np.pi / 2) == pytest.approx(-np.pi / 2)
    assert normalize_angle(0.25) == pytest.approx(0.25)
    np.testing.assert_allclose(normalize_angle(np.array([2 * np.pi, -3 * np.pi / 2])),
                               [0.0, np.pi / 2], atol=1e-12)
