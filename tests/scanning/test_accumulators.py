"""Tests for scanning/accumulators.py - Totals and Max reducers."""

from srcstat.scanning import Max, Totals


class TestTotals:
    def test_empty(self):
        assert Totals() == Totals(files=0, lines=0, words=0, chars=0, bytes=0)

    def test_add_counts_files_and_sums_fields(self, make_record):
        totals = Totals()
        totals.add(make_record("a.txt", lines=2, words=5, chars=26, bytes=27))
        totals.add(make_record("b.txt", lines=1, words=1, chars=3, bytes=4))

        assert totals == Totals(files=2, lines=3, words=6, chars=29, bytes=31)

    def test_merge_equals_adding_everything(self, make_record):
        records = [make_record(f"{i}.txt", lines=i, words=2 * i, chars=3 * i, bytes=4 * i) for i in range(6)]

        whole = Totals()
        for r in records:
            whole.add(r)

        left, right = Totals(), Totals()
        for r in records[:2]:
            left.add(r)
        for r in records[2:]:
            right.add(r)
        right.merge(left)

        assert right == whole


class TestMax:
    def test_empty_is_zero(self):
        assert Max() == Max(lines=0, words=0, chars=0, bytes=0)

    def test_tracks_each_field_independently(self, make_record):
        m = Max()
        m.track(make_record("a", lines=10, words=1, chars=5, bytes=1))
        m.track(make_record("b", lines=1, words=10, chars=2, bytes=50))

        assert m == Max(lines=10, words=10, chars=5, bytes=50)

    def test_merge_is_order_independent(self, make_record):
        a, b = Max(), Max()
        a.track(make_record("a", lines=3, words=9, chars=1, bytes=2))
        b.track(make_record("b", lines=7, words=1, chars=4, bytes=2))

        ab, ba = Max(), Max()
        ab.merge(a)
        ab.merge(b)
        ba.merge(b)
        ba.merge(a)

        assert ab == ba == Max(lines=7, words=9, chars=4, bytes=2)
