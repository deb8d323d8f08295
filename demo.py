#!/usr/bin/env python3
"""
Home Energy Model Demo - sample home with three improvement scenarios

Models the sample home's monthly gas and cooling electricity usage,
checks the model against the utility bills, and prices three
improvements (tighter ventilation, roof insulation, better windows).

Usage:
    python demo.py
    python demo.py output/
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

SAMPLE_HOME = Path(__file__).parent / "examples" / "sample_home"


def demo_base_model():
    """Demo: Build the base model and show annual usage."""
    print("\n" + "=" * 60)
    print("HOME ENERGY MODEL")
    print("=" * 60)

    print(f"\n1. BASE MODEL")
    print(f"   Inputs: {SAMPLE_HOME}")
    print("   " + "-" * 50)

    from src.core.config import settings
    from src.ingest import load_input_data
    from src.orchestrator import HomeEnergyModel

    inputs = load_input_data(SAMPLE_HOME)
    model = HomeEnergyModel(inputs, parameters=settings.model_parameters())

    print(f"   Components: {len(inputs.components)} ({len(inputs.glazing)} glazing)")
    print(f"   Envelope UA: {model.calculator.conductance:,.1f} W/K")
    print(f"   Annual gas: {model.annual_usage.total_gas_usage:,.0f} kWh")
    print(f"   Annual cooling: {model.annual_usage.total_cooling_usage:,.0f} kWh")

    return model


def demo_accuracy(model):
    """Demo: Compare modelled bills with actual bills."""
    print(f"\n2. MODEL ACCURACY")
    print("   " + "-" * 50)

    result = model.accuracy()
    for label, comparison, metrics in (
        ("Gas", result.gas, result.gas_metrics),
        ("Cooling", result.cooling, result.cooling_metrics),
    ):
        total = comparison.total
        error = "n/a" if total.usage_pct_diff is None else f"{total.usage_pct_diff:+.1f}%"
        print(f"   {label}: actual {total.usage1:,.0f} kWh, modelled {total.usage2:,.0f} kWh ({error})")
        print(f"   {label}: NMBE {metrics.nmbe:+.1f}%, CVRMSE {metrics.cvrmse:.1f}%")

    return result


def demo_improvements(model):
    """Demo: Payback of three improvement scenarios."""
    print(f"\n3. IMPROVEMENTS")
    print("   " + "-" * 50)

    from src.ingest import InputFiles, load_input_data
    from src.orchestrator import HomeEnergyModel

    roof = load_input_data(SAMPLE_HOME, InputFiles(components="components_improved_roof.csv"))
    windows = load_input_data(SAMPLE_HOME, InputFiles(
        components="components_improved_windows.csv",
        shgc="shgc_improved_windows.csv",
    ))

    # Improvements keep the base model's constants (HEM_* settings included)
    params = model.parameters
    scenarios = [
        (HomeEnergyModel(model.inputs, params, ventilation_factor=113.6, name="ventilation"), 1000),
        (HomeEnergyModel(roof, params, name="roof"), 5126.8),
        (HomeEnergyModel(windows, params, name="windows"), 45000),
    ]

    results = []
    for improved, cost in scenarios:
        comparison = model.compare_to(improved, additional_cost=cost)
        print(f"   {improved.name}: {comparison.payback.message()}")
        results.append(comparison)

    return results


def write_reports(model, accuracy, comparisons, output_dir: Path):
    """Write every CSV report."""
    print(f"\n4. REPORTS")
    print("   " + "-" * 50)

    from src.export import (
        write_heat_transfer_breakdown,
        write_model_accuracy,
        write_modelled_usage,
        write_scenario_comparison,
    )

    paths = [
        write_modelled_usage(model, "gas", output_dir / "modelled_gas_usage.csv"),
        write_modelled_usage(model, "cooling", output_dir / "modelled_cooling_usage.csv"),
        write_heat_transfer_breakdown(
            model.heat_transfer_breakdown(), output_dir / "heat_transfer_breakdown.csv"
        ),
        write_model_accuracy(accuracy, output_dir / "model_accuracy.csv"),
    ]
    for comparison in comparisons:
        paths.append(write_scenario_comparison(
            comparison, output_dir / f"{comparison.improved_name}_comparison.csv"
        ))

    for path in paths:
        print(f"   - {path}")


def main():
    """Run the demo."""
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None

    try:
        model = demo_base_model()
        accuracy = demo_accuracy(model)
        comparisons = demo_improvements(model)
        if output_dir:
            write_reports(model, accuracy, comparisons, output_dir)

        print("\n" + "=" * 60)
        print("Demo complete!")
        print("=" * 60)
        print("\nNext steps:")
        print("  - Monthly table: hem usage examples/sample_home")
        print("  - Your own home: hem compare <data_dir> --cost 1000 --components <csv>")
        print()

    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
