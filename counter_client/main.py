import argparse
import os

from counter_client.report import print_report, save_bar_chart
from counter_client.sampler import DEFAULT_HEADER_KEY, ERROR_KEY, SampleConfig, run_sampling

# -------------------- Environment --------------------
URL = os.environ.get("COUNTER_URL", "http://localhost:8080/count")
ROUNDS = int(os.environ.get("COUNTER_ROUNDS", 50))
HEADER_KEY = os.environ.get("COUNTER_HEADER_KEY", DEFAULT_HEADER_KEY)
TIMEOUT = float(os.environ.get("COUNTER_TIMEOUT", 10.0))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Call a counting service repeatedly and report which instances answered."
    )
    parser.add_argument("--url", type=str, default=URL)
    parser.add_argument("--rounds", type=int, default=ROUNDS)
    parser.add_argument("--header-key", type=str, default=HEADER_KEY)
    parser.add_argument("--error-key", type=str, default=ERROR_KEY)
    parser.add_argument("--timeout", type=float, default=TIMEOUT, help="Per-request timeout in seconds")
    parser.add_argument("--chart", type=str, default=None, help="Save a bar chart of the distribution to this path")
    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must be >= 0")
    return args


def sample(argv=None, session=None):
    args = parse_args(argv)
    config = SampleConfig(
        url=args.url,
        rounds=args.rounds,
        header_key=args.header_key,
        error_key=args.error_key,
        timeout=args.timeout,
    )

    print(f"Running {config.rounds} invocations on service at {config.url}")
    tally = run_sampling(config, session=session)
    print_report(tally, config.rounds)

    if args.chart:
        save_bar_chart(tally, args.chart, title=f"Response distribution over {config.rounds} requests")
        print(f"Chart saved as {args.chart}")
    return tally


def main():
    sample()


if __name__ == "__main__":
    main()
