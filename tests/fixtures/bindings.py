"""Bindings loaded through paramount.require() in the integration tests."""

__all__ = ["testmethod1", "testmethod2", "undocumented", "VERSION"]

VERSION = "1.0"


def testmethod1(options, items, count, message):
    """
    Test method 1

    @param {Object} [options]
    @param {Number} [options.option1]
    @param {String} [options.option2]
    @param {Array}  [options.stuff]
    @param {Array}  [items]
    @param {Number} [count]
    @param {String} [message]
    @returns {String|null}
    """
    return {
        "sum": options["option1"] + count,
        "msg": options["option2"] + message,
        "items": options["stuff"] + items,
    }


def testmethod2(options, items, count, message=None):
    """
    Test method 2 - mangled docblock

    @param {Object} [options]
    @param {Unknown} [option.option1]
    @param {String} [invalid.option2]
    @param {Array}  [options.stuff]
    @param {Array}  [items]
    @param {Unknown} [count]
    @parax {String} [message]
    @returns {String|null}
    """
    return {
        "sum": count,
        "items": options["stuff"] + items,
    }


def undocumented(value):
    return {"value": value}


def _helper():
    return "private"
