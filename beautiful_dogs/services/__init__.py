from .supabase_manager import SupabaseManager

__all__ = ["SupabaseManager"]
