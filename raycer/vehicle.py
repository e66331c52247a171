"""Vehicles driven by wheels with friction against the ground."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from raycer.common import GRAVITY_ACCELERATION
from raycer.controller import MAX_GEAR, Controller
from raycer.debug import debug_values
from raycer.rigidbody import Rigidbody
from raycer.vector import Vector2, Vector3

STEERING_RATE = 2.4
MAX_STEERING = 0.6
FINAL_DRIVE_RATIO = 4.0


def sigmoid(x: float) -> float:
    """The logistic function."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def calculate_engine_torque(gear: int, gear_levels: int, velocity: float) -> float:
    """Torque delivered by the engine in ``gear`` (independent of velocity)."""
    return gear / gear_levels


@dataclass
class Wheel:
    """One wheel, positioned relative to the vehicle's centre."""

    moment_of_inertia: float
    angular_velocity: float
    radius: float
    steering: float
    position_relative: Vector2


class Vehicle(Rigidbody):
    """A rigid body pushed around by the friction of its wheels."""

    def __init__(
        self,
        model: Any,
        position: Vector3,
        heading: float,
        collider_vertices: Iterable[Vector2],
        mass: float,
        moment_of_inertia: float,
        wheels: Iterable[Wheel],
        controller: Controller,
    ) -> None:
        super().__init__(model, position, heading, collider_vertices, mass, moment_of_inertia)
        self.wheels = [replace(wheel) for wheel in wheels]
        self.controller = controller
        self.gear = 0
        self.engine_torque = 0.0

    def compute_rpm(
        self, velocity: float, gear: int, wheel_radius: float, engine_torque: float
    ) -> float:
        """Engine revolutions per minute at ``velocity`` in ``gear``."""
        if gear == 0:
            raise ValueError("gear must be non-zero")
        circumference = 2 * 3.14159 * wheel_radius
        gear_ratio = FINAL_DRIVE_RATIO / gear
        rpm = (velocity / circumference) * 60.0 * gear_ratio
        return rpm * 100

    def update(self, delta_time: float) -> None:
        world = self.world
        if world is None:
            raise RuntimeError("vehicle is not part of a world")

        super().update(delta_time)

        controls = self.controller.compute_controls(world, self.eid)
        self.gear = controls.gear
        debug_values["ctl_gear"] = str(self.gear)

        self.angular_momentum *= 0.85**delta_time
        debug_values["phys_ang_mom"] = f"{self.angular_momentum:f}"
        debug_values["phys_direction"] = f"{self.heading:f}"

        velocity = self.velocity()
        self.engine_torque = calculate_engine_torque(self.gear, MAX_GEAR, velocity.length())
        debug_values["phys_engine_toruqe"] = f"{self.engine_torque:f}"

        for index, wheel in enumerate(self.wheels):
            wheel.angular_velocity += (
                controls.accelerator * self.engine_torque * delta_time / wheel.moment_of_inertia
            )
            if index < 2:
                target_steering = MAX_STEERING * controls.steering
                if target_steering > wheel.steering:
                    wheel.steering += STEERING_RATE * delta_time
                else:
                    wheel.steering -= STEERING_RATE * delta_time

        grav_force = self.mass * GRAVITY_ACCELERATION
        wheel_count = len(self.wheels)
        torque = 0.0
        force = Vector2()

        for wheel in self.wheels:
            wheel.angular_velocity *= 0.95**delta_time

            bottom_velocity_rel = wheel.angular_velocity * wheel.radius
            wheel_heading = self.heading + wheel.steering
            wheel_heading_vec = Vector2(math.cos(wheel_heading), math.sin(wheel_heading))
            bottom_velocity_vec = wheel_heading_vec * bottom_velocity_rel

            rotation_velocity = wheel.position_relative.normalized().rotate(
                self.heading + math.pi / 2
            ) * (
                self.angular_momentum
                * wheel.position_relative.length()
                / self.moment_of_inertia
            )
            velocity_with_rot = velocity.xz + rotation_velocity

            delta_velocity = velocity_with_rot - bottom_velocity_vec
            delta_velocity_len = delta_velocity.length()

            ground = world.material_at_position(self.position.xz)
            max_static_friction = ground.static_friction_coef * grav_force / wheel_count
            kinetic_friction = ground.kinetic_friction_coef * grav_force / wheel_count

            friction_dir = delta_velocity.normalized()
            wheel_position_rotated = wheel.position_relative.rotate(self.heading)

            cos_heading_friction = wheel_heading_vec.dot(friction_dir)
            sin_position_friction = wheel_position_rotated.normalized().cross(friction_dir)

            if delta_time > 0:
                wheel_ang_acc_to_stop = delta_velocity_len / (wheel.radius * delta_time)
                vehicle_acc_to_stop = delta_velocity_len / delta_time
                friction_to_stop = (
                    wheel_ang_acc_to_stop
                    * wheel.moment_of_inertia
                    / (max(abs(cos_heading_friction), 1.0e-9) * wheel.radius)
                ) + vehicle_acc_to_stop * self.mass
            else:
                friction_to_stop = math.inf

            if friction_to_stop <= max_static_friction:
                actual_friction = friction_to_stop
            else:
                actual_friction = kinetic_friction

            wheel.angular_velocity += (
                actual_friction
                * cos_heading_friction
                * wheel.radius
                * delta_time
                / (wheel.moment_of_inertia * 3.0)
            )
            force = force + friction_dir * (-actual_friction / 3.0)
            torque -= (
                wheel.position_relative.length() * actual_friction * sin_position_friction / 3.0
            )

        self.apply_force(Vector3(force.x, 0.0, force.y), delta_time)
        self.apply_torque(torque, delta_time)

        debug_values["phys_velocity"] = f"{self.velocity().length():f}"

        here = self.position.xz
        for zone_id, zone in world.checkpoints.items():
            if zone.contains(here):
                print(f"Vehicle {self.eid} in checkpoint zone {zone_id}", file=sys.stderr)