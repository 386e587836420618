from enum import IntEnum


class SystemExitCode(IntEnum):
    TransportFailureExitCode = 3
    MalformedResponseExitCode = 4
    AuthenticationFailedExitCode = 5
    ChainProtocolViolationExitCode = 6
    InvalidConfigurationExitCode = 7


class ArmCliException(RuntimeError):
    def __init__(self, error_code, *args: object) -> None:
        super().__init__(*args)
        self.error_code = error_code


class TransportError(ArmCliException):
    def __init__(self, *args: object) -> None:
        super().__init__(SystemExitCode.TransportFailureExitCode.value, *args)


class MalformedResponseError(ArmCliException):
    def __init__(self, *args: object) -> None:
        super().__init__(SystemExitCode.MalformedResponseExitCode.value, *args)


class AuthenticationFailedError(ArmCliException):
    def __init__(self, status_code, *args: object) -> None:
        super().__init__(SystemExitCode.AuthenticationFailedExitCode.value, *args)
        self.status_code = status_code


class ChainProtocolViolation(ArmCliException):
    def __init__(self, *args: object) -> None:
        super().__init__(
            SystemExitCode.ChainProtocolViolationExitCode.value, *args
        )


class InvalidConfigurationError(ArmCliException):
    def __init__(self, *args: object) -> None:
        super().__init__(SystemExitCode.InvalidConfigurationExitCode.value, *args)
