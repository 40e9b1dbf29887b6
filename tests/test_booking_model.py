"""Booking / Train 모델 테스트"""

import pytest

from railbook.models.booking import (
    CLASS_WIDTH,
    GENDER_WIDTH,
    NAME_WIDTH,
    Booking,
    Train,
    truncate_field,
)


class TestTruncateField:
    def test_short_text_unchanged(self):
        assert truncate_field("Ann Lee", NAME_WIDTH) == "Ann Lee"

    def test_ascii_cut_to_width_minus_one(self):
        assert truncate_field("a" * 150, NAME_WIDTH) == "a" * 99

    def test_exact_limit_kept(self):
        assert truncate_field("a" * 99, NAME_WIDTH) == "a" * 99

    def test_cut_at_first_nul(self):
        assert truncate_field("Ann\x00Lee", NAME_WIDTH) == "Ann"

    def test_multibyte_cut_on_char_boundary(self):
        # 한글 1자 = 3바이트, 9바이트 한도 → 3자
        assert truncate_field("가나다라", GENDER_WIDTH) == "가나다"


class TestBooking:
    def test_candidate_has_no_id(self):
        b = Booking.candidate("Ann Lee", 30, "Female", 1, "AC")
        assert b.booking_id == 0
        assert not b.is_assigned

    def test_with_id_returns_new_instance(self):
        b = Booking.candidate("Ann Lee", 30, "Female", 1, "AC")
        assigned = b.with_id(7)
        assert assigned.booking_id == 7
        assert assigned.is_assigned
        assert b.booking_id == 0
        assert assigned.passenger_name == "Ann Lee"

    def test_fields_truncated_on_construction(self):
        b = Booking.candidate("x" * 120, 30, "g" * 15, 1, "c" * 25)
        assert len(b.passenger_name) == NAME_WIDTH - 1
        assert len(b.gender) == GENDER_WIDTH - 1
        assert len(b.travel_class) == CLASS_WIDTH - 1

    def test_nul_in_fields_dropped(self):
        b = Booking.candidate("Ann\x00Lee", 30, "F\x00x", 1, "AC\x00\x00")
        assert (b.passenger_name, b.gender, b.travel_class) == ("Ann", "F", "AC")

    def test_frozen(self):
        b = Booking.candidate("Ann Lee", 30, "Female", 1, "AC")
        with pytest.raises(AttributeError):
            b.age = 31

    def test_summary(self):
        b = Booking(3, "Ann Lee", 30, "Female", 1, "AC")
        s = b.summary()
        assert "#3" in s
        assert "Ann Lee" in s


class TestTrain:
    def test_display(self):
        t = Train(1, "Express A", "Mumbai", "Delhi", 100)
        assert t.display() == "Express A (Mumbai → Delhi)"
