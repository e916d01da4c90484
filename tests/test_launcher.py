"""Tests for the command line launcher."""

import json

from smlbench.launcher import main


def _write_config(path, sml_root, **overrides):
    source = {
        'learningSystems': ['alpha'],
        'scenarios': ['family/uncle'],
        'crossValidationFolds': 2,
        'rootDir': str(sml_root),
    }
    source.update(overrides)
    path.write_text(json.dumps(source))
    return path


class TestLauncher:
    """Tests for launcher.main."""

    def test_successful_run(self, sml_root, tmp_path, monkeypatch, fake_driver):
        monkeypatch.chdir(tmp_path)
        config = _write_config(tmp_path / 'bench.json', sml_root, mex={'outputFile': 'result'})

        assert main([str(config), '-s']) == 0
        assert fake_driver.calls == 2
        assert (tmp_path / 'result.json').is_file()

    def test_glob_runs_each_config(self, sml_root, tmp_path, monkeypatch, fake_driver):
        monkeypatch.chdir(tmp_path)
        configs = tmp_path / 'configs'
        configs.mkdir()
        _write_config(configs / 'a.json', sml_root)
        _write_config(configs / 'b.json', sml_root, scenarios=['family/aunt'])

        assert main([str(configs / '*.json'), '-s']) == 0
        assert fake_driver.calls == 4

    def test_first_failure_stops_the_rest(self, sml_root, tmp_path, monkeypatch, fake_driver):
        monkeypatch.chdir(tmp_path)
        bad = _write_config(tmp_path / 'bad.json', sml_root, crossValidationFolds=1)
        good = _write_config(tmp_path / 'good.json', sml_root)

        assert main([str(bad), str(good), '-s']) == 1
        assert fake_driver.calls == 0

    def test_missing_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert main([str(tmp_path / 'nothing.json'), '-s']) == 1

    def test_configuration_error_during_run(self, sml_root, tmp_path, monkeypatch, fake_driver):
        """A malformed scenario found while running ends the launch with a failure status."""
        monkeypatch.chdir(tmp_path)
        bad = _write_config(tmp_path / 'bad.json', sml_root, scenarios=['a/b/c'])
        good = _write_config(tmp_path / 'good.json', sml_root)

        assert main([str(bad), str(good), '-s']) == 1
        assert fake_driver.calls == 0
