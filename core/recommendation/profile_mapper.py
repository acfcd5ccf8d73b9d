"""
客户画像映射

在行业画像与通用 CustomerProfile 之间转换。
"""

from models import CustomerProfile, HaircareProfile


class ProfileMapper:

    @staticmethod
    def from_haircare_profile(profile: HaircareProfile) -> CustomerProfile:
        """护发画像 -> 通用画像"""
        return CustomerProfile(
            primary_attribute=profile.hair_color,
            concerns=list(profile.hair_concerns),
            services=list(profile.services),
            current_routine=list(profile.home_routine),
            usage_patterns=list(profile.styling_routine),
            service_frequency=profile.salon_frequency or None,
            recent_change=profile.recent_change,
            restrictions=list(profile.allergies or []),
            additional_info=profile.extra_info,
            custom_attributes={"original_type": "HaircareProfile"},
        )

    @staticmethod
    def to_haircare_profile(profile: CustomerProfile) -> HaircareProfile:
        """通用画像 -> 护发画像"""
        return HaircareProfile(
            hair_color=profile.primary_attribute or "",
            hair_concerns=list(profile.concerns),
            services=list(profile.services),
            recent_change=bool(profile.recent_change),
            salon_frequency=profile.service_frequency or "",
            home_routine=list(profile.current_routine),
            styling_routine=list(profile.usage_patterns),
            allergies=list(profile.restrictions) or None,
            extra_info=profile.additional_info,
        )
