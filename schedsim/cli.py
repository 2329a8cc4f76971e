import argparse
import logging
import sys

from schedsim.config import SimulationConfig
from schedsim.display import print_comparison_table, print_process_table, replay, wait_for_enter
from schedsim.errors import SchedulingError
from schedsim.process import generate_random_processes, load_processes, sample_processes
from schedsim.schedulers import POLICIES

logger = logging.getLogger(__name__)


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schedsim", description="CPU scheduling policy simulator")
    parser.add_argument('policy', nargs='?', default='all', choices=list(POLICIES) + ['all'],
                        help='Policy to simulate (default: all)')
    parser.add_argument('--quantum', type=int, default=SimulationConfig.quantum,
                        help='Round Robin time quantum (default: %(default)s)')
    parser.add_argument('--quantum-high', type=int, default=SimulationConfig.quantum_high,
                        help='MLFQ high queue quantum (default: %(default)s)')
    parser.add_argument('--quantum-low', type=int, default=SimulationConfig.quantum_low,
                        help='MLFQ low queue quantum (default: %(default)s)')

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--file', help='CSV file with pid,arrival_time,burst_time[,priority]')
    source.add_argument('--random', type=positive_int, metavar='N', help='Generate N random processes')
    parser.add_argument('--seed', type=int, default=None, help='Seed for --random')

    parser.add_argument('--delay', type=float, default=0.0,
                        help='Seconds to pause per simulated time unit during replay')
    parser.add_argument('--step', action='store_true',
                        help='Wait for Enter after every completed or preempted slice')
    parser.add_argument('--plot', action='store_true', help='Show Gantt and comparison charts')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='-v for info logging, -vv for debug')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = SimulationConfig(
        policy=args.policy,
        quantum=args.quantum,
        quantum_high=args.quantum_high,
        quantum_low=args.quantum_low,
        delay_per_unit=args.delay,
    )

    try:
        schedulers = config.build_schedulers()
        if args.file:
            processes = load_processes(args.file)
        elif args.random is not None:
            processes = generate_random_processes(args.random, seed=args.seed)
        else:
            processes = sample_processes()
        logger.info("simulating %d processes with %s", len(processes),
                    ", ".join(s.name for s in schedulers))

        print("\nProcess Table:")
        print_process_table(processes)

        results = []
        for scheduler in schedulers:
            result = scheduler.schedule(processes)
            print(f"\nSimulation: {scheduler.name}")
            replay(result.events, delay_per_unit=config.delay_per_unit,
                   step=wait_for_enter if args.step else None)
            results.append(result)
    except SchedulingError as exc:
        logger.debug("run aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print_comparison_table(results)

    if args.plot:
        import matplotlib.pyplot as plt
        from schedsim.visualizer import SchedulerVisualizer

        visualizer = SchedulerVisualizer(results)
        visualizer.plot_all_gantt_charts()
        if len(results) > 1:
            visualizer.plot_performance_comparison()
        plt.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
