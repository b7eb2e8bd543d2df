from django.urls import path
from . import views

app_name = 'ai_assistant'

urlpatterns = [
    # POST /api/ai-assistant/ - {type, ...form} -> {response}
    path('', views.ai_assistant, name='generate'),
]
