from django.test import SimpleTestCase, TestCase

from api.models.models_inquiry import Inquiry
from api.utils.pagination import PageLimitPagination, coerce_positive_int


class CoercePositiveIntTests(SimpleTestCase):
    def test_values(self):
        cases = [
            ("3", 3),
            (7, 7),
            (" 2 ", 2),
            (None, 1),
            ("", 1),
            ("abc", 1),
            ("0", 1),
            ("-5", 1),
            ("2.5", 1),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(coerce_positive_int(value, 1), expected)


class PageLimitPaginationTests(TestCase):
    def setUp(self):
        for i in range(23):
            Inquiry.objects.create_inquiry(
                name=f"Client {i}",
                phone=f"0700{i:04d}",
                service_type=Inquiry.ServiceType.OTHER,
                message="hello",
            )
        self.queryset = Inquiry.objects.all()

    def test_defaults(self):
        paginator = PageLimitPagination()
        rows = paginator.paginate_queryset(self.queryset)

        self.assertEqual(len(rows), 10)
        self.assertEqual(paginator.get_pagination_data()["totalPages"], 3)

    def test_limit_is_capped(self):
        with self.settings(INQUIRY_MAX_PAGE_SIZE=20):
            paginator = PageLimitPagination(limit=500)
        self.assertEqual(paginator.limit, 20)

    def test_last_page(self):
        paginator = PageLimitPagination(page=3, limit=10)
        rows = paginator.paginate_queryset(self.queryset)
        data = paginator.get_pagination_data()

        self.assertEqual(len(rows), 3)
        self.assertFalse(data["hasNextPage"])
        self.assertTrue(data["hasPrevPage"])

    def test_page_past_the_end(self):
        paginator = PageLimitPagination(page=9, limit=10)
        self.assertEqual(paginator.paginate_queryset(self.queryset), [])
        self.assertEqual(paginator.get_pagination_data()["totalInquiries"], 23)

    def test_empty_queryset_has_zero_pages(self):
        paginator = PageLimitPagination()
        paginator.paginate_queryset(Inquiry.objects.none())
        data = paginator.get_pagination_data()

        self.assertEqual(data["totalPages"], 0)
        self.assertFalse(data["hasNextPage"])
