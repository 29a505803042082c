"""
Applications app serializers

Serializers for Application and SkillScore models.
"""
from rest_framework import serializers

from .models import SKILL_SCORE_MAX, SKILL_SCORE_MIN, Application, SkillScore


class SkillScoreSerializer(serializers.ModelSerializer):

    class Meta:
        model = SkillScore
        fields = ['id', 'tech_name', 'score']
        read_only_fields = ['id']


class ApplicationSerializer(serializers.ModelSerializer):
    """
    Serializer for Application.

    Skill scores are nested read-only; the analysis result is summarized
    when one exists.
    """

    username = serializers.CharField(source='user.username', read_only=True)
    applicant_name = serializers.CharField(source='user.display_name', read_only=True)
    project_title = serializers.CharField(source='project.title', read_only=True)
    skill_scores = SkillScoreSerializer(many=True, read_only=True)
    analysis = serializers.SerializerMethodField()

    class Meta:
        model = Application
        fields = [
            'id',
            'user',
            'username',
            'applicant_name',
            'project',
            'project_title',
            'status',
            'applied_at',
            'skill_scores',
            'analysis',
        ]
        read_only_fields = ['id', 'user', 'project', 'status', 'applied_at']

    def get_analysis(self, obj: Application):
        result = getattr(obj, 'analysis_result', None)
        if result is None:
            return None
        return {
            'id': result.id,
            'compatibility_score': float(result.compatibility_score),
            'compatibility_reason': result.compatibility_reason,
        }


class ApplicationCreateSerializer(serializers.Serializer):
    """
    Serializer for applying to a project.

    ``tech_stacks`` and ``tech_scores`` are parallel lists.
    """

    tech_stacks = serializers.ListField(
        child=serializers.CharField(max_length=100),
        allow_empty=False,
    )
    tech_scores = serializers.ListField(
        child=serializers.IntegerField(min_value=SKILL_SCORE_MIN, max_value=SKILL_SCORE_MAX),
        allow_empty=False,
    )

    def validate(self, attrs):
        if len(attrs['tech_stacks']) != len(attrs['tech_scores']):
            raise serializers.ValidationError(
                'tech_stacks and tech_scores must have the same number of entries.'
            )
        return attrs


class ApplicationStatusUpdateSerializer(serializers.Serializer):

    status = serializers.ChoiceField(choices=Application.Status.choices)
