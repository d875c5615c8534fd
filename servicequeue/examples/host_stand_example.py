"""
Restaurant host stand example.

Walks through a short evening at a host stand: guests take buzzers, tables
open up, a rowdy guest is shown the door and a regular slips the host a tip
to jump the line.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging
from typing import List

from servicequeue import NO_BUZZER, ServiceQueue


def print_line(queue: ServiceQueue, label: str) -> None:
    """Print the waiting line and reuse pool."""
    print(
        f"{label:<28} line={queue.snapshot()} "
        f"reusable={queue.reusable_buzzers()}"
    )


def run_evening(queue: ServiceQueue) -> List[int]:
    """
    Run the scripted evening against the given queue.

    Args:
        queue: Empty queue to drive.

    Returns:
        Buzzers seated, in the order they were seated.
    """
    seated: List[int] = []

    for _ in range(4):
        buzzer = queue.allocate()
        print(f"Guest arrives, gets buzzer {buzzer}")
    print_line(queue, "After arrivals:")

    seated.append(queue.serve())
    print_line(queue, f"Seated buzzer {seated[-1]}:")

    queue.remove(2)
    print_line(queue, "Buzzer 2 shown the door:")

    queue.expedite(3)
    print_line(queue, "Buzzer 3 tipped the host:")

    buzzer = queue.allocate()
    print(f"Guest arrives, gets reused buzzer {buzzer}")
    print_line(queue, "After late arrival:")

    while True:
        buzzer = queue.serve()
        if buzzer == NO_BUZZER:
            break
        seated.append(buzzer)
    print_line(queue, "Closing time:")

    queue.check_invariants()
    return seated


def main() -> None:
    """Run the host stand example."""
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    seated = run_evening(ServiceQueue())
    print(f"Seating order: {seated}")


if __name__ == "__main__":
    main()
