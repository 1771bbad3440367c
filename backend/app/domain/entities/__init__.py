"""
Initialisation des entités du domaine
Importer ce package enregistre toutes les tables dans SQLModel.metadata
"""

from .activity import Activity, ActivityCreate, ActivityRead, ActivitySummary
from .nutrition import NutritionLog, NutritionLogCreate, NutritionLogRead, NutritionSummary
from .workout import (
    Workout, WorkoutExercise, WorkoutCreate, WorkoutUpdate, WorkoutRead, WorkoutExerciseCreate,
)
from .meditation import MeditationSession, MeditationSessionCreate, MeditationSessionRead, MeditationStats
from .journal import JournalEntry, JournalEntryCreate, JournalEntryRead, JournalEntryUpdate
from .goal import WellnessGoal, WellnessGoalCreate, WellnessGoalRead, WellnessGoalUpdate, GoalProgress
from .quote import WeeklyQuote, WeeklyQuoteRead
from .theme import (
    VisualTheme, VisualThemeCreate, VisualThemeUpdate, VisualThemeRead,
    UserPreferences, UserPreferencesRead, UserPreferencesUpdate,
)
from .visual import (
    RhythmVisual, RhythmVisualCreate, RhythmVisualRead,
    RenewalVisual, RenewalVisualCreate, RenewalVisualRead, CurrentRenewalVisual,
    SavedRenewalItem, SavedRenewalItemCreate, SavedRenewalItemRead, SavedItemPause,
)
from .program import (
    WellnessProgram, WellnessProgramCreate, WellnessProgramUpdate, WellnessProgramSummary, WellnessProgramRead,
    ProgramEnrollment, EnrollmentCreate, ProgressUpdate, ProgramEnrollmentRead,
)
from .insight import (
    ProgramAnalytics, AnalyticsRecord, CommunityInsight, CommunityInsightCreate, CommunityInsightRead,
    TrendingProgram, WellnessStats,
)
from .subscription import (
    UserSubscription, SubscriptionStatus, ActivateSubscriptionRequest,
    SubscriptionPlan, SubscriptionPlanCreate, SubscriptionPlanUpdate, SubscriptionPlanRead,
)
from .admin import (
    AdminCategory, AdminCategoryCreate, AdminCategoryUpdate, AdminCategoryRead,
    AdminContent, AdminContentCreate, AdminContentUpdate, AdminContentRead,
)
from .ai_content import (
    GenerateContentRequest, GenerateContentResponse,
    ImproveContentRequest, ImproveContentResponse,
    GenerateFeaturesRequest, GenerateFeaturesResponse,
)

__all__ = [
    "Activity", "ActivityCreate", "ActivityRead", "ActivitySummary",
    "NutritionLog", "NutritionLogCreate", "NutritionLogRead", "NutritionSummary",
    "Workout", "WorkoutExercise", "WorkoutCreate", "WorkoutUpdate", "WorkoutRead", "WorkoutExerciseCreate",
    "MeditationSession", "MeditationSessionCreate", "MeditationSessionRead", "MeditationStats",
    "JournalEntry", "JournalEntryCreate", "JournalEntryRead", "JournalEntryUpdate",
    "WellnessGoal", "WellnessGoalCreate", "WellnessGoalRead", "WellnessGoalUpdate", "GoalProgress",
    "WeeklyQuote", "WeeklyQuoteRead",
    "VisualTheme", "VisualThemeCreate", "VisualThemeUpdate", "VisualThemeRead",
    "UserPreferences", "UserPreferencesRead", "UserPreferencesUpdate",
    "RhythmVisual", "RhythmVisualCreate", "RhythmVisualRead",
    "RenewalVisual", "RenewalVisualCreate", "RenewalVisualRead", "CurrentRenewalVisual",
    "SavedRenewalItem", "SavedRenewalItemCreate", "SavedRenewalItemRead", "SavedItemPause",
    "WellnessProgram", "WellnessProgramCreate", "WellnessProgramUpdate", "WellnessProgramSummary", "WellnessProgramRead",
    "ProgramEnrollment", "EnrollmentCreate", "ProgressUpdate", "ProgramEnrollmentRead",
    "ProgramAnalytics", "AnalyticsRecord", "CommunityInsight", "CommunityInsightCreate", "CommunityInsightRead",
    "TrendingProgram", "WellnessStats",
    "UserSubscription", "SubscriptionStatus", "ActivateSubscriptionRequest",
    "SubscriptionPlan", "SubscriptionPlanCreate", "SubscriptionPlanUpdate", "SubscriptionPlanRead",
    "AdminCategory", "AdminCategoryCreate", "AdminCategoryUpdate", "AdminCategoryRead",
    "AdminContent", "AdminContentCreate", "AdminContentUpdate", "AdminContentRead",
    "GenerateContentRequest", "GenerateContentResponse",
    "ImproveContentRequest", "ImproveContentResponse",
    "GenerateFeaturesRequest", "GenerateFeaturesResponse",
]
