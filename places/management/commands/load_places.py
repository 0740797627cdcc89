import json

from django.core.management.base import BaseCommand, CommandError

from places.models import Place
from places.services import invalidate_place_views
from places.serializers import normalize_place_input


class Command(BaseCommand):
    help = "JSON 배열 파일의 장소들을 검증 후 Place 테이블에 저장합니다."

    def add_arguments(self, parser):
        parser.add_argument("file_path")
        parser.add_argument("--private", action="store_true", help="비공개 상태로 저장")

    def handle(self, *args, **options):
        file_path = options["file_path"]

        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise CommandError(f"파일을 읽을 수 없습니다: {e}")

        if not isinstance(data, list):
            raise CommandError("JSON 최상위는 배열이어야 합니다.")

        count = 0
        skipped = 0

        for item in data:
            if not isinstance(item, dict):
                skipped += 1
                continue

            payload, error = normalize_place_input(item)
            if error:
                self.stdout.write(self.style.WARNING(f"스킵: {item.get('name')!r} ({error})"))
                skipped += 1
                continue

            payload["image_url"] = item.get("image_url") or None
            payload["is_public"] = not options["private"]
            Place.objects.create(**payload)
            count += 1

        invalidate_place_views()
        self.stdout.write(
            self.style.SUCCESS(
                f"{count}개의 장소를 저장했습니다. (스킵된 건수: {skipped})"
            )
        )
