#!/usr/bin/env python
"""Autopilot descent example.

This example walks through a powered descent on Mars:
1. List the available scenarios
2. Load the 10 km descent scenario
3. Deploy the parachute and fly the staged autopilot to touchdown
4. Repeat with the proportional autopilot
5. Summarize the trajectories

The lander starts at rest 10 km above the surface with its attitude held
vertical, so the engine always pushes straight up.
"""

import numpy as np

from lander import (
    AutopilotMode,
    LanderConfig,
    Scenario,
    SimConfig,
    SimulationResult,
    Simulator,
    list_scenarios,
)

MAX_STEPS = 50000


def fly_descent(mode: AutopilotMode, lander: LanderConfig) -> SimulationResult:
    """Fly scenario 1 to touchdown with the given autopilot."""
    sim = Simulator.from_scenario(
        Scenario.DESCENT_FROM_10KM,
        lander=lander,
        config=SimConfig(autopilot=mode),
    )
    sim.enable_autopilot()

    for _ in range(MAX_STEPS):
        if sim.altitude <= 0.0:
            break
        # Try to open the chute until it is safe to do so
        sim.deploy_parachute()
        sim.step()

    return SimulationResult.from_simulator(sim)


def summarize(name: str, result: SimulationResult) -> None:
    """Print touchdown conditions for a trajectory."""
    fuel_used = 1.0 - result.fuel[-1]
    print(f"   {name}")
    print(f"     Flight time:       {result.time[-1]:.1f} s")
    print(f"     Touchdown speed:   {result.speed[-1]:.2f} m/s")
    print(f"     Max speed:         {np.max(result.speed):.1f} m/s")
    print(f"     Fuel used:         {fuel_used * 100:.1f} %")


def main() -> None:
    """Run the autopilot descent example."""

    print("=" * 60)
    print("MARS LANDER AUTOPILOT DESCENT")
    print("=" * 60)

    # =========================================================================
    # 1. Scenarios
    # =========================================================================
    print("\n1. Available scenarios:")

    for scenario_id, description in list_scenarios():
        if description:
            print(f"   {scenario_id}: {description}")

    # =========================================================================
    # 2. Vehicle
    # =========================================================================
    print("\n2. Lander:")

    lander = LanderConfig()
    print(f"   Mass (full):  {lander.full_mass:.0f} kg")
    print(f"   Max thrust:   {lander.max_thrust:.0f} N")

    # =========================================================================
    # 3. Staged autopilot
    # =========================================================================
    print("\n3. Flying staged autopilot...")
    staged = fly_descent(AutopilotMode.STAGED, lander)
    summarize("Staged", staged)

    # =========================================================================
    # 4. Proportional autopilot
    # =========================================================================
    print("\n4. Flying proportional autopilot...")
    proportional = fly_descent(AutopilotMode.PROPORTIONAL, lander)
    summarize("Proportional", proportional)

    # =========================================================================
    # 5. Trajectory table
    # =========================================================================
    print("\n5. Proportional descent profile:")

    df = proportional.to_dataframe()
    every = max(1, df.height // 10)
    print(df.gather_every(every).select(["time", "altitude", "climb_rate", "throttle", "parachute"]))

    print("\n" + "=" * 60)
    print("Done")
    print("=" * 60)


if __name__ == "__main__":
    main()
