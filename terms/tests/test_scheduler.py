# test_scheduler.py
import unittest
import pygame

from shakescroll.scheduler import TimerScheduler

from terms.tests.fakes import FakeTimers


class TestTimerScheduler(unittest.TestCase):
    def setUp(self):
        self.timers = FakeTimers()
        self.sched = TimerScheduler(set_timer=self.timers)

    def test_add_registers_distinct_sdl_timers(self):
        a = self.sched.add(10, lambda: True)
        b = self.sched.add(10, lambda: True)
        self.assertNotEqual(a, b)
        self.assertEqual(self.timers.calls, [(a, 10), (b, 10)])
        self.assertEqual(self.sched.active(), [a, b])

    def test_dispatch_runs_matching_callback_only(self):
        hits = []
        a = self.sched.add(10, lambda: hits.append("a") or True)
        b = self.sched.add(10, lambda: hits.append("b") or True)

        self.assertTrue(self.sched.dispatch(pygame.event.Event(b)))
        self.assertTrue(self.sched.dispatch(pygame.event.Event(a)))
        self.assertTrue(self.sched.dispatch(pygame.event.Event(b)))
        self.assertEqual(hits, ["b", "a", "b"])

    def test_dispatch_ignores_other_events(self):
        self.sched.add(10, lambda: True)
        self.assertFalse(self.sched.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)))

    def test_returning_false_cancels(self):
        calls = []

        def once():
            calls.append(1)
            return False

        t = self.sched.add(25, once)
        self.assertTrue(self.sched.dispatch(pygame.event.Event(t)))
        self.assertEqual(self.timers.calls[-1], (t, 0))
        self.assertFalse(self.sched.dispatch(pygame.event.Event(t)))
        self.assertEqual(calls, [1])

    def test_cancel_all(self):
        a = self.sched.add(10, lambda: True)
        b = self.sched.add(20, lambda: True)
        self.sched.cancel_all()
        self.assertEqual(self.sched.active(), [])
        self.assertIn((a, 0), self.timers.calls)
        self.assertIn((b, 0), self.timers.calls)

    def test_cancelled_event_type_is_reused(self):
        a = self.sched.add(10, lambda: True)
        self.sched.cancel(a)
        b = self.sched.add(20, lambda: True)
        self.assertEqual(a, b)
        self.assertEqual(self.timers.calls, [(a, 10), (a, 0), (a, 20)])
        self.assertEqual(self.sched.active(), [a])

    def test_restarting_timers_does_not_grow_event_types(self):
        first = [self.sched.add(10, lambda: True) for _ in range(2)]
        for _ in range(50):
            self.sched.cancel_all()
            again = [self.sched.add(10, lambda: True) for _ in range(2)]
            self.assertEqual(sorted(again), sorted(first))

    def test_cancel_unknown_is_noop(self):
        self.sched.cancel(123456)
        self.assertEqual(self.timers.calls, [])

    def test_rejects_non_positive_interval(self):
        with self.assertRaises(ValueError):
            self.sched.add(0, lambda: True)


if __name__ == "__main__":
    unittest.main()
