import pytest

from mrclam_toolkit.core_logic.config import ExtractorConfig, load_config


def test_default_config_file_matches_defaults():
    assert load_config() == ExtractorConfig()


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text(
        "extractor_settings:\n"
        "  max_barcodes: 25\n"
        "  measurement_window_s: 0.1\n"
        "file_names:\n"
        "  barcodes: codes.dat\n"
    )

    config = load_config(str(path))

    assert config.max_barcodes == 25
    assert config.measurement_window_s == 0.1
    assert config.barcodes_file == 'codes.dat'
    assert config.max_landmarks == 15


def test_empty_yaml_uses_defaults(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text("")

    assert load_config(path) == ExtractorConfig()


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'missing.yaml')


def test_invalid_yaml(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text("extractor_settings: [unclosed\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="max_robots"):
        ExtractorConfig.from_dict({'max_robots': 3})


@pytest.mark.parametrize('values', [
    {'max_barcodes': -1},
    {'robot_count': 2.5},
    {'measurement_window_s': 'wide'},
    {'odometry_file': 'Odometry.dat'},
    {'odometry_file': 'Robot{robot}_{kind}.dat'},
    {'measurements_file': 'Robot{robot}_{0}.dat'},
    {'groundtruth_file': 'Robot{robot!z}.dat'},
    {'sample_period': 0},
    {'sample_period': -0.02},
])
def test_invalid_values_rejected(values):
    with pytest.raises(ValueError):
        ExtractorConfig.from_dict(values)


def test_robot_file_uses_one_based_index():
    config = ExtractorConfig()

    assert config.robot_file(config.measurements_file, 0) == 'Robot1_Measurement.dat'


def test_measurement_window_default_shared_with_loaders():
    from mrclam_toolkit.core_logic import processing

    assert processing.DEFAULT_MEASUREMENT_WINDOW_S == ExtractorConfig().measurement_window_s
