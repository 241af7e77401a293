from typing import Dict, List, Mapping

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def percentages(tally: Mapping[str, int], rounds: int) -> Dict[str, float]:
    """Share of all rounds per key, in percent"""
    if rounds == 0:
        return {}
    return {key: count / rounds * 100 for key, count in tally.items()}


def format_report(tally: Mapping[str, int], rounds: int) -> List[str]:
    return [f"Service {key}: {pct:f} percent" for key, pct in percentages(tally, rounds).items()]


def print_report(tally, rounds):
    print("\nResults:\n--------")
    for line in format_report(tally, rounds):
        print(line)


def save_bar_chart(tally, path, title="Response distribution"):
    """Bar chart of responses per service instance"""
    keys = [str(k) for k in tally.keys()]
    fig, ax = plt.subplots()
    ax.bar(keys, list(tally.values()))
    ax.set_title(title)
    ax.set_xlabel("Service")
    ax.set_ylabel("Responses")
    fig.savefig(path)
    plt.close(fig)
