# apps/cabinet/serializers/time_entry.py
from django.utils import timezone
from rest_framework import serializers
from apps.cabinet.models import Task, TimeEntry
from apps.users.serializers import UserMinimalSerializer


class TimeEntrySerializer(serializers.ModelSerializer):
    """
    Temps passé
    - start_at vaut maintenant s'il est omis
    - la durée explicite prime sur l'intervalle
    """

    task_id = serializers.PrimaryKeyRelatedField(source='task', queryset=Task.objects.all())
    client_id = serializers.IntegerField(source='task.client_id', read_only=True)
    user = UserMinimalSerializer(read_only=True)
    start_at = serializers.DateTimeField(required=False)
    minutes = serializers.IntegerField(read_only=True)
    is_running = serializers.BooleanField(read_only=True)

    class Meta:
        model = TimeEntry
        fields = [
            'id',
            'task_id',
            'client_id',
            'user',
            'start_at',
            'end_at',
            'duration_min',
            'minutes',
            'is_running',
            'comment',
            'created_at',
            'updated_at'
        ]
        read_only_fields = ['created_at', 'updated_at']

    def validate(self, attrs):
        if self.instance is None and not attrs.get('start_at'):
            attrs['start_at'] = timezone.now()
        start_at = attrs.get('start_at', getattr(self.instance, 'start_at', None))
        end_at = attrs.get('end_at', getattr(self.instance, 'end_at', None))
        if start_at and end_at and end_at < start_at:
            raise serializers.ValidationError({
                'end_at': "La fin doit être postérieure au début"
            })
        return attrs


class TimerStartSerializer(serializers.Serializer):
    start_at = serializers.DateTimeField(required=False, allow_null=True)


class TimerStopSerializer(serializers.Serializer):
    end_at = serializers.DateTimeField(required=False, allow_null=True)

    def validate(self, attrs):
        end_at = attrs.get('end_at') or timezone.now()
        if end_at < self.context['entry'].start_at:
            raise serializers.ValidationError({
                'end_at': "La fin doit être postérieure au début"
            })
        attrs['end_at'] = end_at
        return attrs
