from __future__ import annotations

import logging

from chartdata import Dataset, series_from_values


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    labels = ["Jan", "Feb", "Mar"]
    revenue = series_from_values([1.0, 5.0, 2.0], label="Revenue")
    data = Dataset(labels, [revenue])
    print(f"left-only: y=[{data.y_min}, {data.y_max}] right=[{data.right_axis_min}, {data.right_axis_max}]")

    data.add_series(series_from_values([10.0, -3.0], label="Cost", axis="right"))
    print(f"dual axis: left=[{data.left_axis_min}, {data.left_axis_max}] right=[{data.right_axis_min}, {data.right_axis_max}]")

    data.remove_series(revenue)
    print(f"right-only: left=[{data.left_axis_min}, {data.left_axis_max}] entries={data.total_entry_count}")

    # Longer than the label sequence: logged, still accepted.
    Dataset(labels, [series_from_values([1, 2, 3, 4], label="Overflow")])


if __name__ == "__main__":
    main()
