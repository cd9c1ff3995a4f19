from nonebot.log import logger


class logger_wrapper:
    """Named logger writing to nonebot's loguru logger.

    Only the name is colored. The message goes in as a format argument,
    which loguru never reads as color markup, so quoted user text such as
    ``<red>`` or ``<\\<>`` is printed as is.
    """

    def __init__(self, logger_name: str) -> None:
        self.name = logger_name

    def _log(self, level: str, message: str,
             exception: Exception | None) -> None:
        logger.opt(colors=True, exception=exception).log(
            level, "<m>{}</m> | {}", self.name, message)

    def critical(self,
                 message: str,
                 exception: Exception | None = None) -> None:
        self._log("CRITICAL", message, exception)

    def error(self, message: str, exception: Exception | None = None) -> None:
        self._log("ERROR", message, exception)

    def warning(self,
                message: str,
                exception: Exception | None = None) -> None:
        self._log("WARNING", message, exception)

    def success(self,
                message: str,
                exception: Exception | None = None) -> None:
        self._log("SUCCESS", message, exception)

    def info(self, message: str, exception: Exception | None = None) -> None:
        self._log("INFO", message, exception)

    def debug(self, message: str, exception: Exception | None = None) -> None:
        self._log("DEBUG", message, exception)

    def trace(self, message: str, exception: Exception | None = None) -> None:
        self._log("TRACE", message, exception)
