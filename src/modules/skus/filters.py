import django_filters

from modules.skus.models import SKU


class SKUFilter(django_filters.FilterSet):
    color = django_filters.CharFilter(field_name="color", lookup_expr="iexact")
    size = django_filters.CharFilter(field_name="size", lookup_expr="iexact")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    in_stock = django_filters.BooleanFilter(method="filter_in_stock")

    class Meta:
        model = SKU
        fields = ["color", "size", "min_price", "max_price", "in_stock"]

    def filter_in_stock(self, queryset, name, value):
        if value is None:
            return queryset
        if value:
            return queryset.filter(stock_quantity__gt=0)
        return queryset.filter(stock_quantity=0)
