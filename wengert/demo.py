"""
Worked examples: evaluate a few expressions and print their partials.

    wengert-demo
    wengert-demo --scenario exp_log --signed-subtraction -v
"""

import argparse
import logging
import sys

from .config import DEFAULT_CONFIG, TapeConfig
from .core.tape import Tape


def _x_times_y_plus_sin_x(t):
    x, y = t.var(0.5, name="x"), t.var(4.2, name="y")
    return x * y + x.sin(), x, y


def _x_minus_x_div_y(t):
    x, y = t.var(1.0, name="x"), t.var(4.0, name="y")
    return x - x / y, x, y


def _exp_x_plus_log_y(t):
    x, y = t.var(1.0, name="x"), t.var(3.0, name="y")
    return x.exp() + y.log(), x, y


SCENARIOS = {
    'mul_sin': ("z = x*y + sin(x)", _x_times_y_plus_sin_x),
    'sub_div': ("z = x - x/y", _x_minus_x_div_y),
    'exp_log': ("z = exp(x) + ln(y)", _exp_x_plus_log_y),
}


def run_scenario(key, config=DEFAULT_CONFIG):
    """Build scenario `key` on a fresh tape; return (z, dz/dx, dz/dy)."""
    _, build = SCENARIOS[key]
    z, x, y = build(Tape(config))
    g = z.grad()
    return z.value, g.wrt(x), g.wrt(y)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Reverse-mode AD worked examples',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--scenario', choices=sorted(SCENARIOS), default=None,
                        help='Run a single scenario (default: all)')
    parser.add_argument('--signed-subtraction', action='store_true',
                        help='Record d(x - y)/dy as -1 instead of +1')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = TapeConfig.signed() if args.signed_subtraction else DEFAULT_CONFIG
    keys = [args.scenario] if args.scenario else list(SCENARIOS)
    for key in keys:
        label, _ = SCENARIOS[key]
        z, dx, dy = run_scenario(key, config)
        print(f"[{key}] {label}")
        print(f"  z     = {z!r}")
        print(f"  dz/dx = {dx!r}")
        print(f"  dz/dy = {dy!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
