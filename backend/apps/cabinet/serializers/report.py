# apps/cabinet/serializers/report.py
from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


class DateRangeSerializer(serializers.Serializer):
    """
    Période inclusive (from / to en jours entiers)

    Les paramètres d'URL s'appellent `from` et `to` ; utiliser
    DateRangeSerializer.from_query_params() pour les lire.
    """

    date_from = serializers.DateField()
    date_to = serializers.DateField()

    def __init__(self, *args, required=True, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['date_from'].required = required
        self.fields['date_to'].required = required

    @classmethod
    def from_query_params(cls, params, required=True, **kwargs):
        data = {}
        for param, field in (('from', 'date_from'), ('to', 'date_to')):
            if params.get(param):
                data[field] = params.get(param)
        if params.get('user_id'):
            data['user_id'] = params.get('user_id')
        return cls(data=data, required=required, **kwargs)

    def validate(self, attrs):
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')
        if date_from and date_to and date_to < date_from:
            raise serializers.ValidationError({
                'to': "La date de fin doit être postérieure ou égale à la date de début"
            })
        return attrs


class TimesheetQuerySerializer(DateRangeSerializer):
    user_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        required=False,
        allow_null=True
    )
