import argparse
import json

import numpy as np

from .black_scholes import BlackScholesModel
from .config import DEFAULTS, GREEK_NAMES, PARITY_RTOL, PRECISION
from .core import BlackScholesModelParams, OptionType, CALL, PUT
from .risk import put_call_parity_residual, scenario_grid


def _kind(s: str):
    if s.strip().lower() == "both":
        return (CALL, PUT)
    try:
        return (OptionType.parse(s),)
    except ValueError:
        raise argparse.ArgumentTypeError("kind must be 'call', 'put' or 'both'")


def _float_list(s: str):
    try:
        return [float(x) for x in s.split(",") if x.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated numbers, got {s!r}")


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--k", type=float, default=DEFAULTS["k"], help="strike")
    parser.add_argument("--s", type=float, default=DEFAULTS["s"], help="underlying price")
    parser.add_argument("--t", type=float, default=DEFAULTS["t"], help="years")
    parser.add_argument("--r", type=float, default=DEFAULTS["r"], help="cont. risk-free")
    parser.add_argument("--v", type=float, default=DEFAULTS["v"], help="volatility")


def _params(parser, args) -> BlackScholesModelParams:
    try:
        return BlackScholesModelParams(k=args.k, s=args.s, t=args.t, r=args.r, v=args.v).validate()
    except ValueError as e:
        parser.error(str(e))


def cmd_calc(parser, args):
    params = _params(parser, args)
    model = BlackScholesModel()
    rows = {kind.value: model.calc(params, kind).as_dict() for kind in args.kind}

    if args.json:
        print(json.dumps(rows, indent=2))
        return

    kinds = list(rows)
    print(f"{'':<8}" + "".join(f"{k:>{PRECISION + 10}}" for k in kinds))
    for name in GREEK_NAMES:
        print(f"{name:<8}" + "".join(f"{rows[k][name]:>{PRECISION + 10}.{PRECISION}f}" for k in kinds))


def cmd_parity(parser, args):
    params = _params(parser, args)
    model = BlackScholesModel()
    call_px = float(model.price(params, CALL))
    put_px = float(model.price(params, PUT))
    forward_gap = params.s - params.k * float(np.exp(-params.r * params.t))
    print(f"call            {call_px:.{PRECISION}f}")
    print(f"put             {put_px:.{PRECISION}f}")
    print(f"call - put      {call_px - put_px:.{PRECISION}f}")
    print(f"s - k*exp(-rt)  {forward_gap:.{PRECISION}f}")
    residual = float(put_call_parity_residual(model, params))
    holds = abs(residual) <= PARITY_RTOL * max(abs(forward_gap), 1.0)
    print(f"residual        {residual:.3e}  ({'ok' if holds else 'VIOLATED'})")


def cmd_grid(parser, args):
    params = _params(parser, args)
    if any(x <= 0 for x in args.spots + args.vols):
        parser.error("spots and vols must be positive")
    model = BlackScholesModel()
    for i, kind in enumerate(args.kind):
        grid = scenario_grid(model, params, kind, args.spots, args.vols)
        if i:
            print()
        print(f"{kind.value} price, rows = spot, cols = vol")
        print(f"{'':>10}" + "".join(f"{v:>14.4f}" for v in grid["vol_values"]))
        for s, row in zip(grid["spot_values"], grid["prices"]):
            print(f"{s:>10.4f}" + "".join(f"{px:>14.6f}" for px in row))


def main(argv=None):
    p = argparse.ArgumentParser(prog="bsgreeks", description="Black-Scholes price and Greeks")
    sub = p.add_subparsers(dest="cmd", required=True)

    # calc
    p_calc = sub.add_parser("calc", help="price and Greeks")
    add_common(p_calc)
    p_calc.add_argument("--kind", type=_kind, default=(CALL, PUT), help="call|put|both")
    p_calc.add_argument("--json", action="store_true", help="emit JSON instead of a table")
    p_calc.set_defaults(func=cmd_calc)

    # parity
    p_par = sub.add_parser("parity", help="put-call parity check")
    add_common(p_par)
    p_par.set_defaults(func=cmd_parity)

    # grid
    p_grid = sub.add_parser("grid", help="spot x vol price grid")
    add_common(p_grid)
    p_grid.add_argument("--kind", type=_kind, default=(CALL,), help="call|put|both")
    p_grid.add_argument("--spots", type=_float_list, default=[80.0, 90.0, 100.0, 110.0, 120.0])
    p_grid.add_argument("--vols", type=_float_list, default=[0.1, 0.2, 0.3])
    p_grid.set_defaults(func=cmd_grid)

    args = p.parse_args(argv)
    args.func(p, args)


if __name__ == "__main__":
    main()
