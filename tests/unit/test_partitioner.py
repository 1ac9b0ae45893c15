"""Tests for season partitioning."""

from collections import Counter

from seasonize.pipeline.partitioner import build_channel


class TestBuildChannel:
    """Tests for build_channel function."""

    def test_one_season_per_year(self, make_record, utc):
        """Each occurring year is one season."""
        records = [
            make_record("a", date=utc(2019, 3)),
            make_record("b", date=utc(2020, 1)),
            make_record("c", date=utc(2020, 12)),
            make_record("d", date=utc(2021, 7)),
        ]

        structure = build_channel("Chan", records)

        assert structure.channel_name == "Chan"
        assert [s.number for s in structure.seasons] == [1, 2, 3]
        assert [s.year for s in structure.seasons] == [2019, 2020, 2021]
        assert [[r.id for r in s.videos] for s in structure.seasons] == [["a"], ["b", "c"], ["d"]]

    def test_season_number_is_rank_not_year(self, make_record, utc):
        """A gap year does not leave a gap in season numbers."""
        records = [make_record("late", date=utc(2022)), make_record("early", date=utc(2018))]

        structure = build_channel("Chan", records)

        assert [s.number for s in structure.seasons] == [1, 2]
        assert [s.year for s in structure.seasons] == [2018, 2022]

    def test_sorts_by_date(self, make_record, utc):
        """Unordered input comes out date-ordered."""
        records = [
            make_record("c", date=utc(2020, 9)),
            make_record("a", date=utc(2020, 1)),
            make_record("b", date=utc(2020, 5)),
        ]

        structure = build_channel("Chan", records)

        assert [r.id for r in structure.seasons[0].videos] == ["a", "b", "c"]
        assert [ep for ep, _ in structure.seasons[0].episodes()] == [1, 2, 3]

    def test_ties_keep_input_order(self, make_record, utc):
        """Same-date videos keep their relative order."""
        same = utc(2020, 4, 4)
        records = [make_record(video_id, date=same) for video_id in ("x", "y", "z")]

        structure = build_channel("Chan", records)

        assert [r.id for r in structure.seasons[0].videos] == ["x", "y", "z"]

    def test_year_boundary_in_utc(self, make_record, utc):
        """New Year's midnight UTC starts the next season."""
        records = [
            make_record("eve", date=utc(2019, 12, 31, 23)),
            make_record("day", date=utc(2020, 1, 1, 0)),
        ]

        structure = build_channel("Chan", records)

        assert len(structure.seasons) == 2

    def test_concatenation_reproduces_input(self, make_record, utc):
        """Every record appears exactly once, ordered non-decreasingly."""
        records = [
            make_record(f"v{i}", date=utc(2015 + (i * 7) % 5, 1 + i % 12, 1 + i % 28))
            for i in range(30)
        ]

        structure = build_channel("Chan", records)
        flattened = [r for s in structure.seasons for r in s.videos]

        assert Counter(map(id, flattened)) == Counter(map(id, records))
        dates = [r.effective_date for r in flattened]
        assert dates == sorted(dates)
        numbers = [s.number for s in structure.seasons]
        assert numbers == list(range(1, len(numbers) + 1))

    def test_seasons_share_records(self, make_record):
        """Seasons reference the original records."""
        record = make_record()

        structure = build_channel("Chan", [record])

        assert structure.seasons[0].videos[0] is record
