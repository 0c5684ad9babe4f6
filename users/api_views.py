from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.views import TokenObtainPairView
from visits.serializers import VisitSerializer
from visits.services import list_visits
from .serializers import EmailTokenObtainPairSerializer

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    return Response({
        'id': request.user.user_id,
        'email': request.user.email,
    })


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def visits_view(request):
    return Response(VisitSerializer(list_visits(request.user), many=True).data)


class EmailTokenObtainPairView(TokenObtainPairView):
    serializer_class = EmailTokenObtainPairSerializer
