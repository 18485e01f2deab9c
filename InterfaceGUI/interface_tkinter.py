# InterfaceGUI/interface_tkinter.py

import logging
import tkinter as tk
from tkinter import ttk, messagebox
import matplotlib.pyplot as plt
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg, NavigationToolbar2Tk

# Módulos para gerenciar caminhos de importação
import sys
import os

# Adiciona a raiz do projeto ao PATH para que 'Simulador', 'CamadaFisica' e 'Utilidades' sejam encontrados
# quando o arquivo é executado diretamente (python InterfaceGUI/interface_tkinter.py).
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from Simulador.main import SimuladorCodificacao
from Simulador.configuracao import build_config, LOG_FORMAT
from CamadaFisica.superficie_matplotlib import MatplotlibSurface
from Utilidades import utils

logger = logging.getLogger(__name__)

DPI = 100


class SignalPlotterGUI:
    """
    Interface Gráfica do plotador de codificação de linha.
    Coleta a sequência de bits, a tensão e o esquema de codificação, valida a tensão
    e desenha a forma de onda resultante em um gráfico Matplotlib embutido.
    """
    def __init__(self, master: tk.Tk, config=None):
        """
        Inicializa a GUI.

        Args:
            master (tk.Tk): A janela principal do Tkinter (root).
            config (dict, opcional): Sobrescritas da configuração padrão.
        """
        self.master = master
        master.title("Plotador de Sinais Digitais")

        self.config = build_config(config)
        self.simulador = SimuladorCodificacao(self.config)

        # --- Variáveis de Controle do Tkinter ---
        self.binary_input_var = tk.StringVar(value=self.config["binary_input"])
        self.raw_binary_input = tk.BooleanVar(value=True) # Se False, o texto é convertido para ASCII antes
        self.voltage_var = tk.StringVar(value=str(self.config["amplitude"]))
        self.encoding_type_var = tk.StringVar(value=self.config["encoding_type"])

        main_frame = ttk.Frame(master, padding="10")
        main_frame.pack(fill=tk.BOTH, expand=True)

        # Frame de entradas (linha superior).
        config_frame = ttk.LabelFrame(main_frame, text="Entrada", padding="10")
        config_frame.pack(fill=tk.X, pady=5)
        config_frame.grid_columnconfigure(1, weight=1)

        self.create_control_row(config_frame, 0, "Entrada Binária:", ttk.Entry(config_frame, textvariable=self.binary_input_var))
        ttk.Checkbutton(config_frame, text="Binário Puro (0s e 1s)", variable=self.raw_binary_input).grid(row=0, column=2, sticky="w", padx=5, pady=2)
        self.create_control_row(config_frame, 1, "Tensão (V):", ttk.Entry(config_frame, textvariable=self.voltage_var))
        self.create_control_row(config_frame, 2, "Codificação:", ttk.Combobox(config_frame, textvariable=self.encoding_type_var,
                                                                         values=self.simulador.get_encoding_options(), state="readonly"))

        ttk.Button(config_frame, text="Plotar Sinal", command=self.plot_signal).grid(row=3, column=0, columnspan=3, pady=10)

        self.status_label = ttk.Label(main_frame, text="Pronto.", foreground="blue")
        self.status_label.pack(fill=tk.X, pady=5)

        # Figura com o mesmo tamanho em pixels da área de desenho configurada.
        figsize = (self.config["canvas_width"] / DPI, self.config["canvas_height"] / DPI)
        self.fig, self.ax = plt.subplots(figsize=figsize, dpi=DPI)
        self.fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        self.canvas = FigureCanvasTkAgg(self.fig, master=main_frame)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

        self.toolbar = NavigationToolbar2Tk(self.canvas, main_frame)
        self.toolbar.update()

        self.surface = MatplotlibSurface(self.ax)
        self.clear_plot()

    def create_control_row(self, parent, row, label_text, widget):
        """
        Cria uma linha padrão composta por rótulo e widget de entrada/seleção.

        Args:
            parent (ttk.Frame): Frame onde será inserida a linha.
            row (int): Posição da linha na grid.
            label_text (str): Texto do rótulo.
            widget (ttk.Widget): Widget de entrada (Entry, Combobox etc.).
        """
        ttk.Label(parent, text=label_text).grid(row=row, column=0, sticky="w", padx=5, pady=2)
        widget.grid(row=row, column=1, sticky="ew", padx=5, pady=2)

    def clear_plot(self):
        """Limpa a área de desenho, mantendo as dimensões configuradas."""
        self.surface.clear(self.config["canvas_width"], self.config["canvas_height"])
        self.canvas.draw()

    def set_status(self, text, color="blue"):
        self.status_label.config(text=text, foreground=color)

    def collect_bits(self):
        """Retorna a sequência de bits a plotar (texto convertido para ASCII se não for binário puro)."""
        message_input = self.binary_input_var.get()
        if self.raw_binary_input.get():
            return message_input
        return utils.text_to_binary(message_input)

    def plot_signal(self):
        """
        Lê as entradas, valida a tensão e plota o sinal codificado.
        Erros de validação são exibidos no rótulo de estado sem alterar o gráfico.
        """
        try:
            amplitude = utils.parse_amplitude(self.voltage_var.get())
            bits = self.collect_bits()
            encoding_type = self.encoding_type_var.get()

            signal = self.simulador.plot_signal(bits, encoding_type, amplitude, self.surface,
                                                self.config["canvas_width"], self.config["canvas_height"])

            if len(signal) == 0:
                self.clear_plot()
                motivo = "informe ao menos um bit" if not bits else f"codificação desconhecida '{encoding_type}'"
                self.set_status(f"Nada a plotar: {motivo}.", "orange")
            elif not utils.is_binary_string(bits):
                # Caracteres fora de '0'/'1' não são rejeitados: cada esquema os trata como o bit padrão.
                self.set_status(f"{encoding_type}: {len(signal)} amostras (caracteres não binários tratados como bit padrão).", "orange")
            else:
                self.set_status(f"{encoding_type}: {len(bits)} bits, {len(signal)} amostras.", "green")

        except ValueError as e:
            self.set_status(f"ERRO: {e}", "red")
        except Exception as e:
            logger.error(f"Erro inesperado ao plotar: {e}", exc_info=True)
            messagebox.showerror("Erro Inesperado", f"Ocorreu um erro inesperado ao plotar o sinal: {e}")


# Ponto de entrada principal do aplicativo GUI.
if __name__ == "__main__":
    logging.basicConfig(level=build_config()["log_level"], format=LOG_FORMAT)
    root = tk.Tk() # Cria a janela principal do Tkinter
    app = SignalPlotterGUI(root) # Instancia a GUI
    root.mainloop() # Inicia o loop de eventos do Tkinter
