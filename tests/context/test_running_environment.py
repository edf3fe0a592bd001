"""Tests for the running environment accessors and setters."""

import pytest

from runenv.domain.environments import CURRENT_KEY, RunningEnvironment
from runenv.domain.exceptions import InvalidEnvironmentError


def _predicates(context) -> list[bool]:
    return [context.is_development(), context.is_staging(), context.is_production()]


class TestRunningEnvironmentDetection:
    """Values picked up by initialize()."""

    def test_production_by_default(self, context):
        """No signals means production."""
        assert context.current() == RunningEnvironment.PRODUCTION
        assert context.is_production() is True

    def test_initialize_reads_markers(self, make_context, config_dir):
        """Marker files are honoured at initialization."""
        (config_dir / "staging-machine").touch()
        assert make_context().is_staging() is True

    def test_initialize_reads_override(self, make_context, environ):
        """The mirror override is honoured at initialization."""
        environ[CURRENT_KEY] = "development"
        assert make_context().is_development() is True

    def test_unrecognised_override_matches_no_predicate(self, make_context, environ):
        """An unvalidated override is exposed as is and no predicate holds."""
        environ[CURRENT_KEY] = "qa-cluster"
        context = make_context()
        assert context.current() == "qa-cluster"
        assert _predicates(context) == [False, False, False]


class TestSetRunningEnvironment:
    """Explicit running environment changes."""

    @pytest.mark.parametrize("name", ["development", "staging", "production"])
    def test_set_then_current(self, context, name):
        """set followed by current returns the name; one predicate holds."""
        context.set_running_environment(name)

        assert context.current() == name
        assert isinstance(context.current(), RunningEnvironment)
        assert _predicates(context).count(True) == 1

    @pytest.mark.parametrize("name", ["development", "staging", "production"])
    def test_set_mirrors_into_environment(self, context, environ, name):
        """Every successful set is written to RUN_ENV_current."""
        context.set_running_environment(name)
        assert environ[CURRENT_KEY] == name

    @pytest.mark.parametrize(
        "name", ["bogus", "Production", "STAGING", "developent", "", " staging"]
    )
    def test_invalid_name_raises_and_keeps_state(self, context, environ, name):
        """Unknown names raise and leave memory and mirror untouched."""
        context.set_staging()

        with pytest.raises(InvalidEnvironmentError) as exc_info:
            context.set_running_environment(name)

        assert exc_info.value.value == name
        assert context.current() == RunningEnvironment.STAGING
        assert environ[CURRENT_KEY] == "staging"

    def test_convenience_setters(self, context, environ):
        """set_development/set_staging/set_production wrap set."""
        context.set_development()
        assert context.is_development() is True
        assert environ[CURRENT_KEY] == "development"

        context.set_staging()
        assert context.is_staging() is True

        context.set_production()
        assert context.is_production() is True
        assert environ[CURRENT_KEY] == "production"

    def test_set_overrides_any_number_of_times(self, context):
        """The value can be overwritten repeatedly."""
        for name in ["staging", "development", "staging", "production"]:
            context.set_running_environment(name)
        assert context.current() == "production"

    def test_set_logs_change(self, context, mock_logger):
        """Explicit sets are logged at info level."""
        context.set_staging()
        mock_logger.info.assert_called_with("Running environment set to staging")
