from rest_framework import serializers

from .models import Visit


class VisitSerializer(serializers.ModelSerializer):
    user_id = serializers.CharField(source='user.user_id', read_only=True)

    class Meta:
        model = Visit
        fields = ['id', 'user_id', 'document_url', 'clinic_name', 'type_of_visit', 'summary', 'visit_date']
