from nonebot.log import logger

from minimarkup.log import logger_wrapper


def test_logger_keeps_markup():
    messages: list[str] = []
    handler = logger.add(messages.append,
                         format="{level} {message}",
                         level="TRACE")
    testcases = [
        "Unknown tag <red> kept as text",
        "Unknown tag <\\<> kept as text",
        "Unknown tag b'ab</\\<b'> kept as text",
        "Braces {0} {name} stay",
    ]
    try:
        log = logger_wrapper("Test")
        for message in testcases:
            log.debug(message)
        log.success("done")
    finally:
        logger.remove(handler)
    assert len(messages) == len(testcases) + 1
    for message, line in zip(testcases, messages):
        assert line.startswith("DEBUG"), line
        assert f"Test | {message}" in line
    assert messages[-1].startswith("SUCCESS")
