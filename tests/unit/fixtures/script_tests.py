"""Plain script registering tests at module level, run at interpreter exit."""

from ticktest import test

test("passing", lambda t: None)


def failing(t):
    t.error("expected %s, got %s", 1, 2)


test("failing", failing)
