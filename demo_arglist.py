"""
Demo: Normalize a component's name-value arguments and show the diagnostics.
"""

from acdc.arglist import ArgListError, parse_args, to_struct
from acdc.config import arg_list_from_yaml, record_to_yaml


BUS_DEFAULTS = {"Vnom": 380, "Type": "DC", "Losses": 0.0}

BUS_YAML = """
Vnom: 48
Losses: 0.02
Colour: red
"""


def print_diagnostic(warning):
    print(f"  ⚠️  [{warning.identifier}] {warning.name}")


def main():
    print()
    print("=" * 70)
    print("NAME-VALUE ARGUMENT LISTS")
    print("=" * 70)
    print()

    x = ["Vnom", 380, "Type", "AC"]
    print(f"Input:  {x}")
    print(f"Record: {to_struct(x)}")
    print()

    args = arg_list_from_yaml(BUS_YAML)
    print(f"From YAML: {args}")
    print("Diagnostics:")
    record = parse_args(args, BUS_DEFAULTS, "cName", "Bus", on_warning=print_diagnostic)
    print("Record with defaults:")
    print(record_to_yaml(record))

    print("Malformed list:")
    try:
        to_struct(["Vnom", 380, "Type"], "cName", "Bus")
    except ArgListError as e:
        print(f"  ❌ {e.identifier}")
    print()


if __name__ == "__main__":
    main()
