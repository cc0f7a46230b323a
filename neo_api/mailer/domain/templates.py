"""Transactional email bodies."""

from __future__ import annotations

WELCOME_SUBJECT = "¡Bienvenido/a a NEO! 🎉 Tu viaje fitness comienza aquí"

_FEATURES = (
    "Crear y gestionar tus programas de entrenamiento",
    "Registrar tus sesiones de running y natación",
    "Controlar tu nutrición y suplementación",
    "Consultar a tu asistente de IA personalizado",
    "Visualizar tu progreso con gráficas detalladas",
)


def render_welcome_html(year: int) -> str:
    """Return the branded welcome message with ``year`` in the footer."""
    features = "\n".join(f"              <li>{item}</li>" for item in _FEATURES)
    return f"""
      <div style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; max-width: 600px; margin: 0 auto; padding: 40px 20px; background-color: #f9fafb;">
        <div style="background: #000000; border-radius: 16px; padding: 40px; text-align: center;">
          <div style="background: #ffffff; display: inline-block; border-radius: 12px; padding: 12px 24px; margin-bottom: 24px;">
            <span style="font-size: 28px; font-weight: 800; color: #000000; letter-spacing: -0.5px;">NEO</span>
          </div>
          <h1 style="color: #ffffff; font-size: 24px; font-weight: 700; margin: 0 0 16px 0;">
            ¡Bienvenido/a a NEO! 🎉
          </h1>
          <p style="color: #d1d5db; font-size: 16px; line-height: 1.6; margin: 0 0 24px 0;">
            Nos alegra mucho que te hayas unido. NEO es tu compañero integral de entrenamiento y nutrición, diseñado para ayudarte a alcanzar tus objetivos fitness.
          </p>
          <div style="background: #1f2937; border-radius: 12px; padding: 24px; margin: 24px 0; text-align: left;">
            <p style="color: #ffffff; font-size: 15px; font-weight: 600; margin: 0 0 12px 0;">
              🚀 ¿Qué puedes hacer con NEO?
            </p>
            <ul style="color: #d1d5db; font-size: 14px; line-height: 2; margin: 0; padding-left: 20px;">
{features}
            </ul>
          </div>
          <p style="color: #9ca3af; font-size: 14px; line-height: 1.5; margin: 24px 0 0 0;">
            ¡Empieza creando tu primer plan de entrenamiento y da el primer paso hacia tus metas! 💪
          </p>
        </div>
        <p style="text-align: center; color: #9ca3af; font-size: 12px; margin-top: 24px;">
          © {year} NEO Fitness. Todos los derechos reservados.
        </p>
      </div>
    """
