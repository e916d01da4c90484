"""Tests for root layout discovery, scenario resolution and the system registry."""

import pytest

from smlbench.benchmark import RootLayout, Scenario, ScenarioResolver, SystemRegistry
from smlbench.exceptions import BenchEnvironmentError, ConfigurationError

from conftest import write_problem


class TestRootLayout:
    """Tests for RootLayout."""

    def test_locate_explicit_root(self, sml_root):
        layout = RootLayout.locate(sml_root)

        assert layout.root == sml_root.resolve()
        assert layout.learning_systems_dir == sml_root.resolve() / 'learningsystems'
        assert layout.learning_problem_dir(Scenario('family', 'uncle'), 'owl') == \
            sml_root.resolve() / 'learningtasks' / 'family' / 'owl' / 'learningproblems' / 'uncle'

    def test_locate_from_environment(self, sml_root, monkeypatch):
        """SMLBENCH_ROOT should be used when no root is given."""
        monkeypatch.setenv('SMLBENCH_ROOT', str(sml_root))

        assert RootLayout.locate().root == sml_root.resolve()

    def test_locate_from_current_dir(self, sml_root, monkeypatch):
        monkeypatch.delenv('SMLBENCH_ROOT', raising=False)
        monkeypatch.chdir(sml_root)

        assert RootLayout.locate().root == sml_root.resolve()

    def test_locate_fails_without_layout(self, tmp_path):
        (tmp_path / 'learningsystems').mkdir()

        with pytest.raises(BenchEnvironmentError, match='learningtasks'):
            RootLayout.locate(tmp_path)

    def test_available_systems(self, sml_root):
        assert RootLayout(sml_root).available_systems() == ('alpha', 'beta')


class TestScenario:
    """Tests for Scenario parsing."""

    def test_parse(self):
        scenario = Scenario.parse('family/uncle')

        assert scenario == Scenario('family', 'uncle')
        assert str(scenario) == 'family/uncle'

    @pytest.mark.parametrize('spec', ['family', 'family/uncle/x', '/uncle', 'family/', '*/uncle'])
    def test_malformed(self, spec):
        with pytest.raises(ConfigurationError, match='Malformed'):
            Scenario.parse(spec)


class TestScenarioResolver:
    """Tests for ScenarioResolver."""

    def test_wildcard_single_language(self, sml_root):
        """A wildcard should expand to every problem directory in name order."""
        resolver = ScenarioResolver(RootLayout(sml_root))

        scenarios = resolver.resolve(['family/*'], ['owl'])

        assert scenarios == [Scenario('family', 'aunt'), Scenario('family', 'grandfather'),
                             Scenario('family', 'uncle')]

    def test_wildcard_across_languages(self, sml_root):
        """Problems shared by several languages should appear once per wildcard."""
        resolver = ScenarioResolver(RootLayout(sml_root))

        scenarios = resolver.resolve(['family/*'], ['owl', 'prolog'])

        assert [s.problem for s in scenarios] == ['aunt', 'grandfather', 'uncle', 'cousin']

    def test_wildcard_ignores_files_and_missing_languages(self, sml_root):
        problems_dir = sml_root / 'learningtasks' / 'family' / 'owl' / 'learningproblems'
        (problems_dir / 'README').write_text('not a problem')

        resolver = ScenarioResolver(RootLayout(sml_root))

        assert len(resolver.resolve(['family/*'], ['owl', 'ruleml'])) == 3

    def test_wildcard_without_problems(self, sml_root):
        resolver = ScenarioResolver(RootLayout(sml_root))

        assert resolver.resolve(['carcinogenesis/*'], ['owl']) == []

    def test_literals_pass_through(self, sml_root):
        """Literal scenarios are not checked against the filesystem and keep duplicates."""
        resolver = ScenarioResolver(RootLayout(sml_root))

        scenarios = resolver.resolve(['mutagenesis/42', 'family/uncle', 'mutagenesis/42'], ['owl'])

        assert scenarios == [Scenario('mutagenesis', '42'), Scenario('family', 'uncle'),
                             Scenario('mutagenesis', '42')]

    def test_mixed_order_follows_specifications(self, sml_root):
        resolver = ScenarioResolver(RootLayout(sml_root))

        scenarios = resolver.resolve(['family/uncle', 'family/*'], ['prolog'])

        assert [str(s) for s in scenarios] == ['family/uncle', 'family/cousin', 'family/uncle']

    def test_resolve_is_idempotent(self, sml_root):
        resolver = ScenarioResolver(RootLayout(sml_root))
        specs = ['family/*', 'family/aunt']

        assert resolver.resolve(specs, ['owl', 'prolog']) == resolver.resolve(specs, ['owl', 'prolog'])

    def test_new_problem_is_discovered(self, sml_root):
        resolver = ScenarioResolver(RootLayout(sml_root))
        write_problem(sml_root, 'family', 'owl', 'brother')

        assert Scenario('family', 'brother') in resolver.resolve(['family/*'], ['owl'])

    @pytest.mark.parametrize('spec', ['/*', '*/*', 'a/b/*'])
    def test_malformed_wildcard(self, sml_root, spec):
        resolver = ScenarioResolver(RootLayout(sml_root))

        with pytest.raises(ConfigurationError):
            resolver.resolve([spec], ['owl'])


class TestSystemRegistry:
    """Tests for SystemRegistry."""

    def test_describe_is_cached(self, sml_root):
        registry = SystemRegistry(RootLayout(sml_root))

        info = registry.describe('alpha')

        assert info.language == 'owl'
        assert info.driver == 'fake'
        assert registry.describe('alpha') is info
        assert registry.language_of('beta') == 'prolog'

    def test_warm_up_keeps_order(self, sml_root):
        registry = SystemRegistry(RootLayout(sml_root))

        infos = registry.warm_up(['beta', 'alpha', 'beta'])

        assert [info.name for info in infos] == ['beta', 'alpha', 'beta']

    def test_missing_system(self, sml_root):
        registry = SystemRegistry(RootLayout(sml_root))

        with pytest.raises(ConfigurationError, match='gamma'):
            registry.describe('gamma')
