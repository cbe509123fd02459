import argparse
import logging

from htm_pooler.config import PoolerConfig, RunConfig
from htm_pooler import runner


def _parse_list(arg: str):
    return [x for x in arg.split(',') if x]


def parse_args():
    parser = argparse.ArgumentParser(description="Drive a spatial pooler over a generated input stream")
    parser.add_argument("--input-length", type=int, default=2000, dest="input_length")
    parser.add_argument("--columns", type=int, default=512, help="Column count")
    parser.add_argument("--k", type=int, default=2, help="Active columns per inhibition area")
    parser.add_argument("--radius", type=int, default=8, help="Inhibition radius (must exceed k)")
    parser.add_argument("--pool-size", type=int, default=8, dest="pool_size", help="Potential pool size per column")
    parser.add_argument("--perm-threshold", type=float, default=0.5, dest="perm_threshold")
    parser.add_argument("--perm-inc", type=float, default=0.05, dest="perm_inc")
    parser.add_argument("--perm-dec", type=float, default=0.02, dest="perm_dec")
    parser.add_argument("--connected-only", action="store_true", dest="connected_only",
                        help="Score only synapses at or above the permanence threshold")
    parser.add_argument("--stimulus", type=float, default=2.0, help="Stimulus threshold")
    parser.add_argument("--period", type=int, default=4, help="Duty cycle period")
    parser.add_argument("--min-overlap-duty", type=float, default=0.1, dest="min_overlap_duty")
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--steps", type=int, default=2)
    parser.add_argument("--pattern", choices=runner.PATTERNS, default="alternating")
    parser.add_argument("--on-bits", type=int, default=40, dest="on_bits")
    parser.add_argument("--outdir", default="runs", help="Directory for outputs")
    parser.add_argument("--plots", default="", help="Comma-separated plots: cycles,boosts")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    pooler_cfg = PoolerConfig(
        input_length=args.input_length,
        column_count=args.columns,
        active_columns_per_area=args.k,
        inhibition_radius=args.radius,
        potential_pool_size=args.pool_size,
        permanence_threshold=args.perm_threshold,
        permanence_increment=args.perm_inc,
        permanence_decrement=args.perm_dec,
        connected_only=args.connected_only,
        stimulus_threshold=args.stimulus,
        duty_cycle_period=args.period,
        min_overlap_duty_cycle=args.min_overlap_duty,
    )
    run_cfg = RunConfig(
        seed=args.seed,
        steps=args.steps,
        pattern=args.pattern,
        on_bits=args.on_bits,
        outdir=args.outdir,
        plots=_parse_list(args.plots),
    )
    runner.main(pooler_cfg, run_cfg)


if __name__ == "__main__":
    main()
