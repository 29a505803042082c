"""
Analysis app serializers
"""
from rest_framework import serializers
from .models import AnalysisResult


class AnalysisResultSerializer(serializers.ModelSerializer):
    """
    Read-only view of an AnalysisResult.
    """

    application_id = serializers.IntegerField(read_only=True)
    compatibility_score = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
    )

    class Meta:
        model = AnalysisResult
        fields = [
            'id',
            'application_id',
            'compatibility_score',
            'compatibility_reason',
            'created_at',
        ]
        read_only_fields = ['id', 'compatibility_reason', 'created_at']
