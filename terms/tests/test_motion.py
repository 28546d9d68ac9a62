# test_motion.py
import math
import random
import unittest

from shakescroll.motion.vector import Vector
from shakescroll.motion.sampler import PositionSampler, PositionSample
from shakescroll.motion.drive import DriveModel
from shakescroll.motion.integrator import Integrator, MotionState
from shakescroll.motion.projector import ScrollProjector, ScrollRange

from terms.tests.fakes import FakeClock, FakeWindow


class TestVector(unittest.TestCase):
    def test_magnitude_is_euclidean(self):
        self.assertEqual(Vector(3, 4).magnitude(), 5.0)

    def test_sub_and_div(self):
        v = (Vector(10, 4) - Vector(4, 2)) / 2
        self.assertEqual(v, Vector(3.0, 1.0))

    def test_of_accepts_int_pairs(self):
        self.assertEqual(Vector.of((7, -2)), Vector(7.0, -2.0))


class TestPositionSampler(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock()
        self.win = FakeWindow(100, 50)
        self.sampler = PositionSampler(self.win.position, self.clock)

    def test_sample_captures_position_and_time(self):
        s = self.sampler.sample()
        self.assertEqual(s, PositionSample(Vector(100.0, 50.0), 100.0))

    def test_velocity_is_finite_difference(self):
        prev = self.sampler.sample()
        self.clock.advance(0.01)
        self.win.x, self.win.y = 130, 10
        v = self.sampler.velocity(prev)
        self.assertAlmostEqual(v.x, 3000.0)
        self.assertAlmostEqual(v.y, -4000.0)

    def test_velocity_with_explicit_position(self):
        prev = self.sampler.sample((0, 0))
        self.clock.advance(0.5)
        v = self.sampler.velocity(prev, (1, 2))
        self.assertEqual(v, Vector(2.0, 4.0))

    def test_velocity_zero_dt_is_none(self):
        prev = self.sampler.sample()
        self.win.x = 500
        self.assertIsNone(self.sampler.velocity(prev))

    def test_velocity_negative_dt_is_none(self):
        prev = self.sampler.sample()
        self.clock.advance(-1.0)
        self.assertIsNone(self.sampler.velocity(prev))

    def test_velocity_nan_dt_is_none(self):
        prev = self.sampler.sample()
        self.clock.t = float("nan")
        self.win.x = 500
        self.assertIsNone(self.sampler.velocity(prev))

    def test_first_tick_is_warm_up(self):
        self.assertFalse(self.sampler.warmed_up)
        self.assertIsNone(self.sampler.tick())
        self.assertTrue(self.sampler.warmed_up)

        self.clock.advance(0.01)
        self.win.x += 10
        v = self.sampler.tick()
        self.assertAlmostEqual(v.x, 1000.0)
        self.assertAlmostEqual(v.y, 0.0)

    def test_tick_rolls_record_even_on_degenerate_dt(self):
        self.sampler.tick()
        self.win.x += 10
        self.assertIsNone(self.sampler.tick())      # same timestamp
        self.clock.advance(0.01)
        v = self.sampler.tick()                     # against the rolled record
        self.assertEqual(v, Vector(0.0, 0.0))

    def test_reset_restores_warm_up(self):
        self.sampler.tick()
        self.sampler.reset()
        self.clock.advance(0.01)
        self.assertIsNone(self.sampler.tick())


class TestDriveModel(unittest.TestCase):
    def test_scenario_from_docs(self):
        acc = DriveModel().drive(Vector(3, 4), 0.2)
        self.assertAlmostEqual(acc, 1e-3 * 5 - 0.2)
        self.assertAlmostEqual(acc, -0.195)

    def test_direction_independent(self):
        d = DriveModel()
        diag = d.drive(Vector(300, 400), 0.0)
        axis = d.drive(Vector(0, -500), 0.0)
        self.assertEqual(diag, axis)

    def test_still_window_only_restores(self):
        self.assertEqual(DriveModel().drive(Vector(0, 0), 0.7), -0.7)

    def test_custom_constants(self):
        d = DriveModel(gain=0.5, spring_constant=2.0)
        self.assertAlmostEqual(d.drive(Vector(0, 4), 0.25), 1.5)


class TestIntegrator(unittest.TestCase):
    def setUp(self):
        self.integ = Integrator()

    def test_semi_implicit_order(self):
        s = MotionState(acceleration=2.0, speed=0.5, ratio=0.1)
        out = self.integ.integrate(s, 0.1)
        self.assertAlmostEqual(out.ratio, 0.1 + 0.5 * 0.1)     # old speed
        self.assertAlmostEqual(out.speed, 0.5 + 2.0 * 0.1)
        self.assertEqual(out.acceleration, 2.0)

    def test_input_state_untouched(self):
        s = MotionState(acceleration=1.0, speed=1.0, ratio=0.5)
        self.integ.integrate(s, 0.1)
        self.assertEqual(s, MotionState(1.0, 1.0, 0.5))

    def test_upper_clamp_zeroes_speed(self):
        out = self.integ.integrate(MotionState(acceleration=0.0, speed=2.0, ratio=0.0), 1.0)
        self.assertEqual(out.ratio, 1.0)
        self.assertEqual(out.speed, 0.0)

    def test_lower_clamp_zeroes_speed(self):
        out = self.integ.integrate(MotionState(acceleration=-1.0, speed=-3.0, ratio=0.2), 0.5)
        self.assertEqual(out.ratio, 0.0)
        self.assertEqual(out.speed, 0.0)

    def test_non_positive_dt_is_noop(self):
        s = MotionState(acceleration=5.0, speed=1.0, ratio=0.3)
        for dt in (0.0, -0.01):
            out = self.integ.integrate(s, dt)
            self.assertEqual(out, s)
            self.assertIsNot(out, s)

    def test_nan_dt_is_noop(self):
        s = MotionState(acceleration=5.0, speed=1.0, ratio=0.3)
        self.assertEqual(self.integ.integrate(s, float("nan")), s)

    def test_nan_ratio_never_latches(self):
        out = self.integ.integrate(MotionState(acceleration=0.0, speed=float("nan"), ratio=0.5), 0.01)
        self.assertEqual(out.ratio, 0.0)
        self.assertEqual(out.speed, 0.0)


class TestScrollProjector(unittest.TestCase):
    def test_scenario_from_docs(self):
        self.assertEqual(ScrollProjector.project(0.5, ScrollRange(0, 100, 20)), 40)

    def test_endpoints(self):
        r = ScrollRange(lower=10, upper=510, page_size=100)
        self.assertEqual(ScrollProjector().project(0.0, r), 10)
        self.assertEqual(ScrollProjector().project(1.0, r), 410)

    def test_degenerate_range_is_arithmetic(self):
        r = ScrollRange(lower=0, upper=50, page_size=100)
        self.assertEqual(r.span, -50)
        self.assertEqual(ScrollProjector.project(1.0, r), -50)


class TestDynamics(unittest.TestCase):
    """Drive + integrate loop, the way the two periodic tasks combine."""

    def _step(self, state, drive, integ, velocity, dt):
        state.acceleration = drive.drive(velocity, state.ratio)
        return integ.integrate(state, dt)

    def test_ratio_stays_in_unit_interval_and_clamps_stop(self):
        rng = random.Random(1234)
        drive, integ = DriveModel(), Integrator()
        s = MotionState()
        for _ in range(5000):
            v = Vector(rng.uniform(-4000, 4000), rng.uniform(-4000, 4000))
            dt = rng.choice([0.0, -0.003, 0.001, 0.01, 0.01, 0.05, 0.2])
            s.acceleration = drive.drive(v, s.ratio)
            raw = s.ratio + s.speed * dt if dt > 0 else s.ratio
            s = integ.integrate(s, dt)
            self.assertTrue(0.0 <= s.ratio <= 1.0)
            self.assertTrue(math.isfinite(s.speed))
            if raw < 0.0 or raw > 1.0:
                self.assertEqual(s.speed, 0.0)

    def test_deterministic(self):
        rng = random.Random(7)
        inputs = [(Vector(rng.uniform(-3000, 3000), rng.uniform(-3000, 3000)), rng.uniform(0.005, 0.02))
                  for _ in range(500)]

        def run():
            drive, integ = DriveModel(), Integrator()
            s = MotionState()
            trace = []
            for v, dt in inputs:
                s = self._step(s, drive, integ, v, dt)
                trace.append((s.acceleration, s.speed, s.ratio))
            return trace

        self.assertEqual(run(), run())

    def test_settles_back_to_zero(self):
        drive, integ = DriveModel(), Integrator()
        s = MotionState(ratio=0.5)
        prev = s.ratio
        for _ in range(1000):
            s = self._step(s, drive, integ, Vector(0, 0), 0.01)
            self.assertLessEqual(s.ratio, prev)
            prev = s.ratio
        self.assertEqual(s.ratio, 0.0)
        self.assertEqual(s.speed, 0.0)

        # and stays at rest
        for _ in range(100):
            s = self._step(s, drive, integ, Vector(0, 0), 0.01)
            self.assertEqual((s.ratio, s.speed), (0.0, 0.0))

    def test_sustained_shaking_scrolls_to_bottom(self):
        drive, integ = DriveModel(), Integrator()
        s = MotionState()
        for i in range(600):
            v = Vector(3000 if i % 2 else -3000, 0)
            s = self._step(s, drive, integ, v, 0.01)
        self.assertEqual(s.ratio, 1.0)


if __name__ == "__main__":
    unittest.main()
