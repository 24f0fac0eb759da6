# PATH: apps/core/management/commands/set_union_sender_key.py
"""
조합별 알림톡 발신 프로필 키 / 채널명 설정.

사용:
  python manage.py set_union_sender_key --union=mokdong-4 --sender-key=abc123 --channel=목동4구역
  python manage.py set_union_sender_key --union=1 --clear
"""
from django.core.management.base import BaseCommand

from johapon.adapters.db.django import repositories_core as core_repo


class Command(BaseCommand):
    help = "Set Union.alimtalk_sender_key / kakao_channel_id for 알림톡 발송."

    def add_arguments(self, parser):
        parser.add_argument("--union", type=str, required=True, help="Union slug or id (e.g. mokdong-4, 1)")
        parser.add_argument("--sender-key", type=str, default="", help="대행사 발신 프로필 키")
        parser.add_argument("--channel", type=str, default="", help="카카오 채널명 (표시용)")
        parser.add_argument("--clear", action="store_true", help="전용 채널 해제 (기본 채널 '조합온' 사용)")

    def handle(self, *args, **options):
        union_arg = str(options["union"]).strip()
        if union_arg.isdigit():
            union = core_repo.union_get_by_id_any(int(union_arg))
        else:
            union = core_repo.union_get_by_slug(union_arg)
        if not union:
            self.stderr.write(self.style.ERROR(f"Union '{union_arg}' not found."))
            return

        if options["clear"]:
            union.alimtalk_sender_key = ""
            union.kakao_channel_id = ""
        else:
            sender_key = (options["sender_key"] or "").strip()
            if not sender_key:
                self.stderr.write(self.style.ERROR("--sender-key 또는 --clear 를 지정하세요."))
                return
            union.alimtalk_sender_key = sender_key
            union.kakao_channel_id = (options["channel"] or "").strip()

        union.save(update_fields=["alimtalk_sender_key", "kakao_channel_id", "updated_at"])
        channel = union.kakao_channel_id or "조합온 (기본)"
        self.stdout.write(
            self.style.SUCCESS(f"Union {union.slug} (id={union.id}): channel -> {channel}")
        )
