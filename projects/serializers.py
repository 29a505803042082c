"""
Projects app serializers

Serializers for Project model and its status/content updates.
"""
from rest_framework import serializers
from .models import Project


class ProjectSerializer(serializers.ModelSerializer):
    """
    Serializer for Project.

    Creator is set from the request; status starts as RECRUITING and is
    changed through the status endpoint only.
    """

    creator_name = serializers.CharField(source='creator.display_name', read_only=True)
    tech_stack_list = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = Project
        fields = [
            'id',
            'creator',
            'creator_name',
            'title',
            'description',
            'tech_stack',
            'tech_stack_list',
            'team_size',
            'current_team_size',
            'duration_weeks',
            'content',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'creator',
            'current_team_size',
            'status',
            'created_at',
            'updated_at',
        ]


class ProjectStatusUpdateSerializer(serializers.Serializer):

    status = serializers.CharField(min_length=1, max_length=20)


class ProjectContentUpdateSerializer(serializers.Serializer):

    content = serializers.CharField(allow_blank=True)
