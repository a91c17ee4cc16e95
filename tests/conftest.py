"""
测试共用的数据集构造工具
"""

from pathlib import Path

import pytest

BARCODES = """# Barcodes
#
# Subject #\tBarcode #
1\t72
2\t90
3\t63
4\t54
5\t70
6\t36
7\t18
"""

LANDMARKS = """# Landmark groundtruth
# Subject #\tx [m]\ty [m]\tx std-dev [m]\ty std-dev [m]
6\t1.88032539\t-5.57229508\t0.00001974\t0.00004067
7\t4.46773211\t-4.44348983\t0.00002196\t0.00004923
"""

GROUNDTRUTH = """# Time [s]\tx [m]\ty [m]\torientation [rad]
1248272272.841\t0.898\t-2.357\t0.024
1248272272.851\t0.899\t-2.357\t0.025
1248272272.861\t0.900\t-2.356\t0.025
"""

ODOMETRY = """# Time [s]\tforward velocity [m/s]\tangular velocity [rad/s]
1248272272.840\t0.0\t0.0
1248272272.861\t0.1\t-0.05
"""

MEASUREMENTS = """# Time [s]\tSubject #\trange [m]\tbearing [rad]
10.00\t36\t3.2\t0.1
10.03\t18\t4.1\t-0.2
10.20\t72\t1.5\t0.7
"""


def write_dataset(root: Path, robot_count: int = 5, barcodes: str = BARCODES,
                  landmarks: str = LANDMARKS, groundtruth: str = GROUNDTRUTH,
                  odometry: str = ODOMETRY, measurements: str = MEASUREMENTS) -> Path:
    """在指定目录写出一个最小的MRCLAM数据集"""
    root.mkdir(parents=True, exist_ok=True)
    (root / 'Barcodes.dat').write_text(barcodes)
    (root / 'Landmark_Groundtruth.dat').write_text(landmarks)
    for robot in range(1, robot_count + 1):
        (root / f'Robot{robot}_Groundtruth.dat').write_text(groundtruth)
        (root / f'Robot{robot}_Odometry.dat').write_text(odometry)
        (root / f'Robot{robot}_Measurement.dat').write_text(measurements)
    return root


@pytest.fixture
def dataset_dir(tmp_path):
    return write_dataset(tmp_path / 'MRCLAM_Dataset1')
