# coding: UTF-8


class ConfigurationError(Exception):
    pass


class BenchEnvironmentError(Exception):
    pass


class AbsoluteMeasureNotImplementedError(NotImplementedError):
    pass


class JobFailure(Exception):
    pass


class FinalizationError(Exception):
    pass


class DuplicateResultError(Exception):
    pass


class StateError(Exception):
    pass


class AlreadyFinalizedError(StateError):
    pass
