"""Keyframe curves that drive the transforms of scene objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .object3d import Object3D
from .quat import Quat, slerp
from .vector import Vec3, lerp


@dataclass
class Keyframe:
    time: float = 0.0
    position: Vec3 = field(default_factory=Vec3.zero)
    rotation: Quat = field(default_factory=Quat.identity)
    scale: Vec3 = field(default_factory=Vec3.one)


class AnimationCurve:
    """Time-sorted keyframes, optionally looping and played at a speed factor."""

    def __init__(self, loop: bool = False, speed: float = 1.0) -> None:
        self.keyframes: list[Keyframe] = []
        self.loop = loop
        self.speed = speed

    def __len__(self) -> int:
        return len(self.keyframes)

    def add_keyframe(self, keyframe: Keyframe) -> None:
        self.keyframes.append(keyframe)
        self.keyframes.sort(key=lambda k: k.time)

    def remove_keyframe(self, index: int) -> None:
        """Remove the keyframe at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.keyframes):
            del self.keyframes[index]

    def clear_keyframes(self) -> None:
        self.keyframes.clear()

    def current_keyframes(self, time: float) -> tuple[int, int, float]:
        """Return the two keyframe indices around ``time`` and the blend factor."""
        frames = self.keyframes
        if len(frames) <= 1:
            return 0, 0, 0.0

        time *= self.speed
        last = frames[-1].time
        if self.loop and last != 0.0:
            time = math.fmod(time, last)

        for i, (k1, k2) in enumerate(zip(frames, frames[1:])):
            if k1.time <= time <= k2.time:
                span = k2.time - k1.time
                t = (time - k1.time) / span if span > 0.0 else 0.0
                return i, i + 1, t

        end = len(frames) - 1
        if self.loop:
            span = frames[0].time + (last - frames[0].time)
            t = (time - last) / span if span != 0.0 else 0.0
            return end, 0, t
        return end, end, 0.0

    def evaluate(self, time: float) -> tuple[Vec3, Quat, Vec3]:
        """Interpolated (position, rotation, scale) at ``time``."""
        if not self.keyframes:
            raise ValueError("curve has no keyframes")
        i1, i2, t = self.current_keyframes(time)
        k1, k2 = self.keyframes[i1], self.keyframes[i2]
        return (
            lerp(k1.position, k2.position, t),
            slerp(k1.rotation, k2.rotation, t),
            lerp(k1.scale, k2.scale, t),
        )


class Animation:
    """A set of curves, one per target object, played on a shared clock."""

    def __init__(self, name: str = "", duration: float = 0.0) -> None:
        self.name = name
        self.duration = duration
        self.current_time = 0.0
        self.playing = False
        self.loop = False
        self.speed = 1.0
        self.curves: dict[Object3D, AnimationCurve] = {}

    def __repr__(self) -> str:
        return f"Animation({self.name!r}, duration={self.duration})"

    @property
    def targets(self) -> list[Object3D]:
        return list(self.curves)

    def add_curve(self, target: Optional[Object3D], curve: Optional[AnimationCurve]) -> None:
        if target is None or curve is None:
            return
        self.curves[target] = curve
        if curve.keyframes:
            self.duration = max(self.duration, curve.keyframes[-1].time)

    def remove_curve(self, target: Object3D) -> None:
        if target in self.curves:
            del self.curves[target]
            self.recalculate_duration()

    def recalculate_duration(self) -> None:
        self.duration = max(
            (c.keyframes[-1].time for c in self.curves.values() if c.keyframes),
            default=0.0,
        )
        self.duration = max(self.duration, 0.0)

    def curve_for(self, target: Object3D) -> Optional[AnimationCurve]:
        return self.curves.get(target)

    def play(self) -> None:
        self.playing = True

    def stop(self) -> None:
        self.playing = False

    def pause(self) -> None:
        self.playing = False

    def resume(self) -> None:
        self.playing = True

    def reset(self) -> None:
        self.current_time = 0.0

    def _wrap(self, time: float) -> float:
        return math.fmod(time, self.duration) if self.duration != 0.0 else 0.0

    def set_time(self, time: float) -> None:
        """Jump to ``time``, wrapping when looping and clamping otherwise."""
        self.current_time = time
        if self.current_time > self.duration:
            self.current_time = self._wrap(time) if self.loop else self.duration

    def is_finished(self) -> bool:
        return not self.loop and self.current_time >= self.duration

    def update(self, delta_time: float) -> None:
        """Advance the clock and apply every curve to its target."""
        if not self.playing:
            return

        self.current_time += delta_time * self.speed
        if self.current_time > self.duration:
            if self.loop:
                self.current_time = self._wrap(self.current_time)
            else:
                self.current_time = self.duration
                self.playing = False

        for target, curve in self.curves.items():
            if not curve.keyframes:
                continue
            position, rotation, scale = curve.evaluate(self.current_time)
            target.position = position
            target.rotation = rotation
            target.scale = scale


class AnimationSystem:
    """An ordered collection of animations updated together."""

    def __init__(self) -> None:
        self.animations: list[Animation] = []

    def __len__(self) -> int:
        return len(self.animations)

    def __iter__(self):
        return iter(self.animations)

    def add(self, animation: Optional[Animation]) -> None:
        if animation is not None:
            self.animations.append(animation)

    def remove(self, animation: Animation) -> None:
        if animation in self.animations:
            self.animations.remove(animation)

    def remove_at(self, index: int) -> None:
        if 0 <= index < len(self.animations):
            del self.animations[index]

    def clear(self) -> None:
        self.animations.clear()

    def find(self, name: str) -> Optional[Animation]:
        return next((a for a in self.animations if a.name == name), None)

    def update(self, delta_time: float) -> None:
        for animation in self.animations:
            if animation.playing:
                animation.update(delta_time)

    def play_all(self) -> None:
        for animation in self.animations:
            animation.play()

    def stop_all(self) -> None:
        for animation in self.animations:
            animation.stop()

    def reset_all(self) -> None:
        for animation in self.animations:
            animation.reset()