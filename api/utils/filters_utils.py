"""FilterSets used by the inquiry admin listing."""

import django_filters

from api.models.models_inquiry import Inquiry


class InquiryFilter(django_filters.FilterSet):
    """FilterSet for the admin inquiry list.

    All filters are optional and combined with AND:
    - ``status``: exact match against the status enumeration,
    - ``phone``: case-insensitive substring,
    - ``referenceCode``: case-insensitive substring on the reference code.
    """

    status = django_filters.CharFilter(field_name="status", lookup_expr="exact")
    phone = django_filters.CharFilter(field_name="phone", lookup_expr="icontains")
    referenceCode = django_filters.CharFilter(field_name="reference_code", lookup_expr="icontains")

    class Meta:
        model = Inquiry
        fields = ["status", "phone"]
